"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat transport.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_CHAT_URL = "http://localhost:9000/chat"


class ClientConfig(BaseModel):
    """Configuration for talking to the chat service.

    Attributes:
        chat_url: Full URL of the chat endpoint.
        timeout: Seconds to wait for a reply before giving up.
    """

    chat_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_URL", DEFAULT_CHAT_URL),
        description="Chat endpoint URL",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_TIMEOUT", "60")),
        gt=0.0,
        le=600.0,
        description="Request timeout in seconds",
    )

    @field_validator("chat_url")
    @classmethod
    def validate_chat_url(cls, v: str) -> str:
        """Validate that the chat URL is an absolute HTTP(S) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "Chat URL must start with http:// or https://. Set CHAT_API_URL in .env"
            )
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If CHAT_API_URL is not an HTTP(S) URL.
    """
    return ClientConfig()
