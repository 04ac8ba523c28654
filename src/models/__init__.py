"""Pydantic models for the resume chat client.

Client-side domain objects owned by the conversation controller. Wire
payloads exchanged with the backend live in ``src.models.schemas``.

Models:
    - Role: Speaker of a conversation turn
    - Turn: One immutable message in the conversation
    - SessionStatus: Whether a resume session is active
    - Session: Server-assigned session binding queries to one resume
    - ResumeDocument: File handle passed to the upload operation
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """A single message in the conversation.

    Attributes:
        role: Who produced the message.
        text: The message content.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Message role: 'user' or 'assistant'")
    text: str = Field(..., description="The message content")


class SessionStatus(str, Enum):
    """Lifecycle state of the client's single session."""

    NONE = "none"
    ACTIVE = "active"


class Session(BaseModel):
    """The server-assigned session for the currently uploaded resume.

    Attributes:
        id: Opaque session identifier, None when no session is active.
        status: NONE or ACTIVE.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    status: SessionStatus = SessionStatus.NONE

    @property
    def is_active(self) -> bool:
        return self.status is SessionStatus.ACTIVE


class ResumeDocument(BaseModel):
    """A resume file selected by the user.

    Attributes:
        filename: Original file name, sent as the multipart filename.
        content: Raw file bytes.
        content_type: MIME type reported by the picker, if any.
    """

    filename: str = Field(..., min_length=1)
    content: bytes
    content_type: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.content
