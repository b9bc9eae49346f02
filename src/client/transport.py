"""HTTP transport for the chat service.

Posts ``{"message": ...}`` as JSON and expects ``{"response": ...}`` back.
Every failure mode collapses into TransportError.
"""

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from src.client.config import ClientConfig, get_client_config
from src.models.schemas import ChatReply, ChatRequest

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when the chat service cannot produce a reply."""

    pass


class Transport(Protocol):
    """Anything able to exchange one message for one raw reply."""

    async def send(self, message: str) -> str: ...


class ChatTransport:
    """JSON-over-HTTP client for the chat endpoint."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            client: Optional shared HTTP client. A short-lived client is
                    opened per request when omitted.
        """
        self._config = config or get_client_config()
        self._client = client

    async def send(self, message: str) -> str:
        """Send a message and return the raw reply text.

        Args:
            message: The user's message, sent as-is.

        Returns:
            The ``response`` field of the service's JSON body.

        Raises:
            TransportError: On connection errors, non-success status codes,
                or a body that is not ``{"response": str}``.
        """
        if self._client is not None:
            return await self._post(self._client, message)
        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            return await self._post(client, message)

    async def _post(self, client: httpx.AsyncClient, message: str) -> str:
        payload = ChatRequest(message=message).model_dump()
        try:
            response = await client.post(self._config.chat_url, json=payload)
            logger.debug(f"Chat service answered {response.status_code}")
            response.raise_for_status()
            reply = ChatReply.model_validate_json(response.content)
        except httpx.HTTPStatusError as e:
            logger.warning(f"Chat service returned HTTP {e.response.status_code}")
            raise TransportError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning(f"Connection to chat service failed: {e}")
            raise TransportError(f"Connection failed: {e}") from e
        except ValidationError as e:
            logger.warning(f"Malformed reply from chat service: {e}")
            raise TransportError("Malformed reply from chat service") from e
        return reply.response
