"""Client configuration with environment variable loading.

Pydantic-based configuration for the backend API client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://ai-bot-lac-three.vercel.app"

# Same as httpx's own default timeout
DEFAULT_TIMEOUT = 5.0


class ClientConfig(BaseModel):
    """Configuration for the PDF chat API client.

    Attributes:
        base_url: Root URL of the backend, without trailing slash.
        timeout: Per-request timeout in seconds.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_BASE_URL),
        validate_default=True,
        description="Backend base URL",
    )
    timeout: float = Field(
        default_factory=lambda: os.getenv("API_TIMEOUT", DEFAULT_TIMEOUT),
        validate_default=True,
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop trailing slashes."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API base URL must start with http:// or https://. Set API_BASE_URL in .env"
            )
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL or API_TIMEOUT is invalid.
    """
    return ClientConfig()
