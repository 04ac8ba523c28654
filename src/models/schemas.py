"""Wire schemas for the resume backend REST API.

Field aliases match the backend's camelCase JSON; models accept either the
alias or the Python field name.
"""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UploadResponse(_WireModel):
    """Body returned by ``POST /api/resume/upload``.

    Attributes:
        success: Whether the backend accepted the resume.
        session_id: Session bound to the uploaded resume.
        summary: AI-generated resume summary.
        message: Human-readable status or rejection reason.
        resume_length: Number of characters extracted from the resume.
    """

    success: bool = False
    session_id: str | None = Field(None, alias="sessionId")
    summary: str | None = None
    message: str | None = None
    resume_length: int | None = Field(None, alias="resumeLength")


class UploadResult(BaseModel):
    """Successful upload outcome handed to the controller.

    Attributes:
        session_id: New session identifier.
        summary: Resume summary used to seed the conversation.
        message: Backend status message.
        resume_length: Extracted text length, when reported.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., min_length=1)
    summary: str = ""
    message: str | None = None
    resume_length: int | None = None


class QueryRequest(_WireModel):
    """JSON body for ``POST /api/resume/query``.

    The session id is sent out-of-band in the ``X-Session-ID`` header.
    """

    question: str = Field(..., min_length=1)
    context: str | None = None


class QueryResponse(_WireModel):
    """Body returned by ``POST /api/resume/query``.

    ``success`` is absent on older backends; an answer alone counts as success.
    """

    answer: str | None = None
    success: bool | None = None
    error: str | None = None
    session_id: str | None = Field(None, alias="sessionId")


class SuggestionSet(_WireModel):
    """Suggested questions grouped by category.

    Attributes:
        interview: Interview preparation prompts.
        analysis: Resume analysis prompts.
        matching: Job matching prompts (optional on the backend).
    """

    model_config = ConfigDict(frozen=True)

    interview: tuple[str, ...] = ()
    analysis: tuple[str, ...] = ()
    matching: tuple[str, ...] = ()


class HealthStatus(_WireModel):
    """Body returned by ``GET /api/resume/health``."""

    status: str | None = None
    service: str | None = None
    version: str | None = None
