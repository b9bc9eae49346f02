"""Pydantic models for the conversation and the chat wire format.

Models:
    - Turn: Immutable message in the transcript
    - Role / Status: Turn speaker and submission status
    - ParsedReply: Reply text split from its citation labels
    - ChatRequest / ChatReply: JSON bodies exchanged with the chat service
"""

from src.models.schemas import ChatReply, ChatRequest, ParsedReply, Role, Status, Turn

__all__ = ["ChatReply", "ChatRequest", "ParsedReply", "Role", "Status", "Turn"]
