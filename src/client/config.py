"""Client configuration with environment variable loading.

Pydantic-based configuration for the resume backend gateway and the
conversation controller.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8080"


class ClientConfig(BaseModel):
    """Configuration for the resume chat client.

    Attributes:
        api_base_url: Backend base URL (API_BASE_URL).
        request_timeout: Timeout in seconds for query, suggestion and health calls.
        upload_timeout: Timeout in seconds for resume uploads.
        suggestion_limit: Suggestions shown per category in the sidebar.
        release_session_on_reset: Ask the backend to drop the old session
            when the user starts over with a new resume.
    """

    # Environment defaults arrive as strings and must be coerced
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        description="Resume backend base URL",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("API_TIMEOUT", "120"),
        gt=0.0,
        le=600.0,
        description="Timeout in seconds for JSON API calls",
    )
    upload_timeout: float = Field(
        default_factory=lambda: os.getenv("UPLOAD_TIMEOUT", "300"),
        gt=0.0,
        le=1800.0,
        description="Timeout in seconds for resume uploads",
    )
    suggestion_limit: int = Field(
        default_factory=lambda: os.getenv("SUGGESTION_LIMIT", "3"),
        ge=0,
        le=20,
        description="Suggested questions shown per category",
    )
    release_session_on_reset: bool = Field(
        default_factory=lambda: os.getenv("RELEASE_SESSION_ON_RESET", "true"),
        description="Delete the previous backend session on 'New Resume'",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API base URL must start with http:// or https://. Check API_BASE_URL in .env"
            )
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
