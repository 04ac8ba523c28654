"""Async HTTP gateway to the resume backend.

Every operation is a single round trip through its own ``httpx.AsyncClient``.
Nothing is retried and nothing is cached; transport and protocol failures are
converted into the typed errors from ``src.client.errors`` so that no httpx
exception reaches the controller.

Endpoints:
    - POST /api/resume/upload: Multipart resume upload
    - POST /api/resume/query: Question about the uploaded resume
    - GET /api/resume/suggestions: Suggested questions
    - GET /api/resume/health: Backend status
    - DELETE /api/resume/session/{id}: Release a session
"""

import logging

import httpx
from pydantic import ValidationError

from src.client.config import ClientConfig, get_client_config
from src.client.errors import (
    FetchError,
    FetchFailure,
    QueryError,
    QueryFailure,
    UploadError,
    UploadFailure,
)
from src.models import ResumeDocument
from src.models.schemas import (
    HealthStatus,
    QueryRequest,
    QueryResponse,
    SuggestionSet,
    UploadResponse,
    UploadResult,
)

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/resume/upload"
QUERY_PATH = "/api/resume/query"
SUGGESTIONS_PATH = "/api/resume/suggestions"
HEALTH_PATH = "/api/resume/health"
SESSION_PATH = "/api/resume/session/{session_id}"

SESSION_HEADER = "X-Session-ID"

UPLOAD_FAILED_MESSAGE = "Failed to upload resume"
UPLOAD_NETWORK_MESSAGE = "Error uploading resume. Please try again."

_HEALTHY_STATUSES = {"up", "healthy", "ok"}
_SESSION_STATUS_CODES = {400, 401, 403, 404}


def _error_message(response: httpx.Response, default: str) -> str:
    """Pull the backend's message/error field out of a response, if any."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return default


class ResumeApiClient:
    """Typed client for the resume backend.

    Args:
        config: Client configuration. Loads from environment if not provided.
        transport: Optional httpx transport, used to route requests in-process.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.api_base_url

    def _client(self, timeout: float | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=timeout or self._config.request_timeout,
            transport=self._transport,
        )

    async def upload_document(self, document: ResumeDocument) -> UploadResult:
        """Upload a resume and open a new backend session.

        Args:
            document: The resume file. Must not be empty.

        Returns:
            UploadResult with the new session id and resume summary.

        Raises:
            ValueError: If the document has no content.
            UploadError: If the backend rejects the file or cannot be reached.
        """
        if document.is_empty:
            raise ValueError("Cannot upload an empty document")

        files = {
            "file": (
                document.filename,
                document.content,
                document.content_type or "application/octet-stream",
            )
        }
        async with self._client(self._config.upload_timeout) as client:
            try:
                response = await client.post(UPLOAD_PATH, files=files)
            except httpx.RequestError as e:
                logger.warning(f"Upload of {document.filename} failed: {e}")
                raise UploadError(UploadFailure.NETWORK, UPLOAD_NETWORK_MESSAGE) from e

        if response.status_code == 413:
            raise UploadError(
                UploadFailure.TOO_LARGE,
                _error_message(response, "File is too large. Maximum size is 10MB."),
                response.status_code,
            )

        message = _error_message(response, UPLOAD_FAILED_MESSAGE)
        if response.status_code == 415 or (
            response.status_code == 400 and message.startswith("Invalid file")
        ):
            raise UploadError(UploadFailure.INVALID_TYPE, message, response.status_code)
        if response.is_error:
            raise UploadError(UploadFailure.SERVER_REJECTED, message, response.status_code)

        try:
            body = UploadResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UploadError(
                UploadFailure.SERVER_REJECTED, UPLOAD_FAILED_MESSAGE, response.status_code
            ) from e

        session_id = (body.session_id or "").strip()
        if not body.success:
            raise UploadError(
                UploadFailure.SERVER_REJECTED,
                body.message or UPLOAD_FAILED_MESSAGE,
                response.status_code,
            )
        if not session_id:
            raise UploadError(UploadFailure.SERVER_REJECTED, UPLOAD_FAILED_MESSAGE, response.status_code)

        logger.info(f"Uploaded {document.filename} (session {session_id})")
        return UploadResult(
            session_id=session_id,
            summary=body.summary or "",
            message=body.message,
            resume_length=body.resume_length,
        )

    async def submit_query(
        self,
        session_id: str,
        question: str,
        context: str | None = None,
    ) -> str:
        """Ask a question about the resume bound to ``session_id``.

        Args:
            session_id: Active session, sent in the X-Session-ID header.
            question: The user's question.
            context: Optional extra context (job description). Unused by the UI.

        Returns:
            The answer text.

        Raises:
            QueryError: If the session is unknown, the backend fails, or the
                request cannot be delivered.
        """
        payload = QueryRequest(question=question, context=context)
        async with self._client() as client:
            try:
                response = await client.post(
                    QUERY_PATH,
                    json=payload.model_dump(),
                    headers={SESSION_HEADER: session_id},
                )
            except httpx.RequestError as e:
                raise QueryError(QueryFailure.NETWORK, f"Connection failed: {e}") from e

        if response.status_code in _SESSION_STATUS_CODES:
            raise QueryError(
                QueryFailure.SESSION_INVALID,
                _error_message(response, "Session is no longer valid"),
                response.status_code,
            )
        if response.is_error:
            raise QueryError(
                QueryFailure.SERVER_ERROR,
                _error_message(response, f"HTTP {response.status_code}"),
                response.status_code,
            )

        try:
            body = QueryResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise QueryError(
                QueryFailure.SERVER_ERROR, "Malformed query response", response.status_code
            ) from e

        # The backend reports processing failures as 200 with success=false
        if body.success is False or body.answer is None:
            raise QueryError(
                QueryFailure.SERVER_ERROR,
                body.error or "Query returned no answer",
                response.status_code,
            )
        return body.answer

    async def fetch_suggestions(self) -> SuggestionSet:
        """Fetch the suggested question lists.

        Returns:
            SuggestionSet grouped by category.

        Raises:
            FetchError: If the request fails or the body is malformed.
        """
        async with self._client() as client:
            try:
                response = await client.get(SUGGESTIONS_PATH)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise FetchError(
                    FetchFailure.SERVER_ERROR,
                    f"HTTP {e.response.status_code}",
                    e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise FetchError(FetchFailure.NETWORK, f"Connection failed: {e}") from e

        try:
            return SuggestionSet.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FetchError(
                FetchFailure.SERVER_ERROR, "Malformed suggestions response", response.status_code
            ) from e

    async def check_health(self) -> bool:
        """Return True if the backend answers its health endpoint as up."""
        async with self._client() as client:
            try:
                response = await client.get(HEALTH_PATH)
            except httpx.RequestError as e:
                logger.warning(f"Health check failed: {e}")
                return False

        if response.is_error:
            logger.warning(f"Health check returned HTTP {response.status_code}")
            return False
        try:
            health = HealthStatus.model_validate(response.json())
        except (ValueError, ValidationError):
            # Any 2xx without a status payload still means the server is up
            return True
        return health.status is None or health.status.lower() in _HEALTHY_STATUSES

    async def clear_session(self, session_id: str) -> bool:
        """Ask the backend to drop a session's stored resume.

        Best effort: failures are logged and reported as False.
        """
        async with self._client() as client:
            try:
                response = await client.delete(SESSION_PATH.format(session_id=session_id))
            except httpx.RequestError as e:
                logger.warning(f"Failed to release session {session_id}: {e}")
                return False

        if response.is_error:
            logger.warning(
                f"Backend refused to release session {session_id}: HTTP {response.status_code}"
            )
            return False
        logger.info(f"Released session {session_id}")
        return True
