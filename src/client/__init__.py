"""Chat client core: configuration, HTTP transport and conversation state.

Responsibilities:
    - Loading the chat endpoint settings from the environment
    - Posting messages to the chat service and validating replies
    - Tracking the transcript and the idle/pending submission status

Holds no presentation logic. The UI layer binds to ConversationStore.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.store import FALLBACK_MESSAGE, ConversationStore
from src.client.transport import ChatTransport, Transport, TransportError

__all__ = [
    "FALLBACK_MESSAGE",
    "ChatTransport",
    "ClientConfig",
    "ConversationStore",
    "Transport",
    "TransportError",
    "get_client_config",
]
