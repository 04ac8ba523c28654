"""HTTP gateway to the resume backend.

Responsibilities:
    - Resume upload and session creation
    - Question submission bound to a session header
    - Suggested question retrieval
    - Health checks and session release

Returns validated pydantic models and raises typed errors. Holds no state
beyond its configuration.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.errors import (
    FetchError,
    FetchFailure,
    GatewayError,
    QueryError,
    QueryFailure,
    UploadError,
    UploadFailure,
)
from src.client.gateway import ResumeApiClient

__all__ = [
    "ClientConfig",
    "FetchError",
    "FetchFailure",
    "GatewayError",
    "QueryError",
    "QueryFailure",
    "ResumeApiClient",
    "UploadError",
    "UploadFailure",
    "get_client_config",
]
