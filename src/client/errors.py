"""Typed failures raised by the resume API gateway."""

from enum import Enum


class UploadFailure(str, Enum):
    """Why a resume upload failed."""

    INVALID_TYPE = "invalid_type"
    TOO_LARGE = "too_large"
    SERVER_REJECTED = "server_rejected"
    NETWORK = "network"


class QueryFailure(str, Enum):
    """Why a question could not be answered."""

    SESSION_INVALID = "session_invalid"
    SERVER_ERROR = "server_error"
    NETWORK = "network"


class FetchFailure(str, Enum):
    """Why suggestions could not be fetched."""

    NETWORK = "network"
    SERVER_ERROR = "server_error"


class GatewayError(Exception):
    """Base class for backend call failures.

    Attributes:
        reason: Failure category.
        message: Human-readable description, safe to show to the user.
        status_code: HTTP status, when a response was received.
    """

    def __init__(self, reason: Enum, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reason={self.reason.value!r}, message={self.message!r})"


class UploadError(GatewayError):
    """Raised when a resume upload fails."""

    reason: UploadFailure


class QueryError(GatewayError):
    """Raised when a resume query fails."""

    reason: QueryFailure


class FetchError(GatewayError):
    """Raised when the suggestion list cannot be fetched."""

    reason: FetchFailure
