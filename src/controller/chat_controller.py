"""Session-scoped conversation controller.

Owns the session store, conversation log, query pipeline and suggestion cache
for one client. The view calls the methods below and re-renders from the
read-only properties whenever a subscribed listener fires.
"""

import logging
from collections.abc import Callable

from src.client.config import ClientConfig, get_client_config
from src.client.errors import UploadError
from src.client.gateway import ResumeApiClient
from src.controller.conversation_log import ConversationLog
from src.controller.query_pipeline import QueryPipeline
from src.controller.session_store import SessionStore
from src.controller.suggestion_cache import SuggestionCache
from src.models import ResumeDocument, Session, Turn
from src.models.schemas import SuggestionSet

logger = logging.getLogger(__name__)

SEED_SUFFIX = "\n\nWhat would you like to know?"

ChangeListener = Callable[[], None]


class ResumeChatController:
    """Single owner of the client's conversation state.

    Args:
        gateway: Backend client. Built from ``config`` if not provided.
        config: Client configuration. Loads from environment if not provided.
    """

    def __init__(
        self,
        gateway: ResumeApiClient | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._gateway = gateway or ResumeApiClient(self._config)
        self._sessions = SessionStore()
        self._log = ConversationLog()
        self._pipeline = QueryPipeline(
            self._gateway, self._sessions, self._log, on_pending_change=self._notify
        )
        self._suggestions = SuggestionCache(self._gateway)
        self._uploading = False
        self._listeners: list[ChangeListener] = []
        self._log.subscribe(lambda _turns: self._notify())

    # === State ===

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def session(self) -> Session:
        return self._sessions.current

    @property
    def turns(self) -> tuple[Turn, ...]:
        return self._log.turns

    @property
    def is_pending(self) -> bool:
        return self._pipeline.is_pending

    @property
    def is_uploading(self) -> bool:
        return self._uploading

    @property
    def suggestions(self) -> SuggestionSet | None:
        return self._suggestions.suggestions

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener fired after any state change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # === Operations ===

    async def upload(self, document: ResumeDocument | None) -> UploadError | None:
        """Upload a resume and start a new conversation about it.

        Missing or empty documents, and uploads started while another one is
        running, are ignored.

        Args:
            document: The selected resume file.

        Returns:
            The UploadError to show the user, or None on success or no-op.
        """
        if document is None or document.is_empty or self._uploading:
            return None

        self._uploading = True
        self._notify()
        try:
            result = await self._gateway.upload_document(document)
        except UploadError as e:
            logger.warning(f"Upload of {document.filename} failed ({e.reason.value}): {e.message}")
            self.reset()
            return e
        else:
            self._sessions.create(result.session_id)
            self._log.seed(f"{result.summary}{SEED_SUFFIX}")
            return None
        finally:
            self._uploading = False
            self._notify()

    def can_ask(self, question: str | None) -> bool:
        return self._pipeline.accepts(question)

    async def ask(self, question: str) -> bool:
        """Ask a question about the current resume. See ``QueryPipeline.ask``."""
        return await self._pipeline.ask(question)

    def reset(self) -> None:
        """End the current session and empty the conversation."""
        self._sessions.reset()
        self._log.clear()

    async def new_resume(self) -> None:
        """Reset locally, then release the old session on the backend if configured."""
        previous = self._sessions.session_id
        self.reset()
        if previous and self._config.release_session_on_reset:
            await self._gateway.clear_session(previous)

    async def load_suggestions(self) -> SuggestionSet | None:
        """Fetch suggestions once per controller lifetime."""
        suggestions = await self._suggestions.load()
        self._notify()
        return suggestions

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Controller listener failed")
