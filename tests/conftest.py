"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: Config pointing at a fake chat endpoint
    - make_transport: Builds a ChatTransport over httpx.MockTransport
    - fake_transport: Scriptable in-memory Transport
    - store: ConversationStore wired to fake_transport
"""

from collections.abc import Callable

import httpx
import pytest

from src.client.config import ClientConfig
from src.client.store import ConversationStore
from src.client.transport import ChatTransport, TransportError

CHAT_URL = "http://chat.test/chat"


class FakeTransport:
    """Transport returning queued replies, or raising queued errors."""

    def __init__(self) -> None:
        self.replies: list[str | Exception] = []
        self.sent: list[str] = []

    async def send(self, message: str) -> str:
        self.sent.append(message)
        if not self.replies:
            raise TransportError("No reply queued")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def client_config() -> ClientConfig:
    """Return config for a fake chat endpoint.

    Returns:
        ClientConfig pointing at CHAT_URL with a short timeout.
    """
    return ClientConfig(chat_url=CHAT_URL, timeout=5.0)


@pytest.fixture
def make_transport(
    client_config: ClientConfig,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], ChatTransport]:
    """Return a factory building ChatTransport over a request handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ChatTransport:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ChatTransport(config=client_config, client=client)

    return factory


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def store(fake_transport: FakeTransport) -> ConversationStore:
    return ConversationStore(transport=fake_transport)
