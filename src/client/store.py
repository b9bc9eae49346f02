"""Conversation state for one chat session.

ConversationStore owns the transcript, the idle/pending status and the
text being composed. Every submission goes through it:

1. The user turn is appended and the status flips to pending before the
   request leaves.
2. The reply is parsed into an assistant turn, or replaced by a fixed
   fallback turn when the transport fails.
3. The status returns to idle and the composed text is cleared on every
   exit path.

The transcript only ever grows; nothing is removed or reordered.
"""

import asyncio
import logging
from collections.abc import Callable

from src.client.transport import ChatTransport, Transport
from src.models.schemas import Role, Status, Turn
from src.parsing.annotations import parse_response

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Sorry, there was an error processing your request."
FALLBACK_TURN = Turn(content=FALLBACK_MESSAGE, role=Role.ASSISTANT)


class ConversationStore:
    """Transcript, status and composed input for a single session."""

    def __init__(self, transport: Transport | None = None) -> None:
        """Initialize an empty, idle conversation.

        Args:
            transport: Chat transport. Defaults to an HTTP transport
                       configured from the environment.
        """
        self._transport = transport or ChatTransport()
        self._turns: list[Turn] = []
        self._status = Status.IDLE
        self._listeners: list[Callable[[], None]] = []
        self.pending_input: str = ""

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def status(self) -> Status:
        return self._status

    @property
    def is_pending(self) -> bool:
        return self._status is Status.PENDING

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(listener)

    async def submit(self, raw_input: str) -> Turn | None:
        """Submit a message and wait for the exchange to settle.

        Args:
            raw_input: Text typed by the user. Sent untrimmed.

        Returns:
            The assistant (or fallback) turn, or None when the input was
            blank or another exchange is still pending.
        """
        if not self._begin(raw_input):
            return None
        return await self._settle(raw_input)

    def start(self, raw_input: str) -> "asyncio.Task[Turn] | None":
        """Submit a message in the background.

        The user turn is already in the transcript when this returns.
        Must be called from inside a running event loop.

        Returns:
            The task resolving to the assistant turn, or None when the
            input was rejected.
        """
        if not self._begin(raw_input):
            return None
        return asyncio.create_task(self._settle(raw_input))

    def _begin(self, raw_input: str) -> bool:
        if not raw_input.strip():
            return False
        if self.is_pending:
            logger.warning("Ignoring submission while a reply is pending")
            return False

        self._turns.append(Turn(content=raw_input, role=Role.USER))
        self._status = Status.PENDING
        logger.info(f"Submitting message ({len(raw_input)} chars)")
        self._notify()
        return True

    async def _settle(self, raw_input: str) -> Turn:
        # Cancellation skips the except clause but still lands in finally,
        # so the exchange is closed with the fallback turn.
        turn = FALLBACK_TURN
        try:
            raw_reply = await self._transport.send(raw_input)
            parsed = parse_response(raw_reply)
            turn = Turn(
                content=parsed.content,
                role=Role.ASSISTANT,
                sources=parsed.sources or None,
            )
        except Exception:
            logger.exception("Chat request failed")
        finally:
            self._turns.append(turn)
            self._status = Status.IDLE
            self.pending_input = ""
            self._notify()
        return turn

    def _notify(self) -> None:
        for listener in self._listeners:
            try:
                listener()
            except Exception:
                logger.exception("Conversation listener failed")
