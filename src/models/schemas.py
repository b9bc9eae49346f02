from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Status(str, Enum):
    """Submission status of a conversation."""

    IDLE = "idle"
    PENDING = "pending"


class Turn(BaseModel):
    """A single message in the conversation.

    Turns are immutable once created.

    Attributes:
        content: Display text.
        role: Who produced the turn.
        sources: Citation labels, only set on assistant turns that carried
            a citation footer.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    role: Role
    sources: list[str] | None = None


class ParsedReply(BaseModel):
    """A raw reply split into display text and citation labels."""

    content: str
    sources: list[str] = Field(default_factory=list)


class ChatRequest(BaseModel):
    """Request payload sent to the chat service."""

    message: str


class ChatReply(BaseModel):
    """Response payload returned by the chat service."""

    response: str
