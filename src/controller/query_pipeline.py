"""Serialized question/answer loop for the active session.

One question may be in flight per client. The user's turn is appended before
the request goes out; the assistant turn (answer or apology) follows once the
request resolves, unless the session changed in the meantime.
"""

import logging
from collections.abc import Callable

from src.client.errors import QueryError
from src.client.gateway import ResumeApiClient
from src.controller.conversation_log import ConversationLog
from src.controller.session_store import SessionStore
from src.models import Role, Session

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "I encountered an error. Please try again."


class QueryPipeline:
    """Drives questions from the user to the backend and back into the log.

    Args:
        gateway: Backend client used for ``submit_query``.
        sessions: Store holding the active session.
        log: Conversation log receiving the turns.
        on_pending_change: Called whenever ``is_pending`` flips.
    """

    def __init__(
        self,
        gateway: ResumeApiClient,
        sessions: SessionStore,
        log: ConversationLog,
        on_pending_change: Callable[[], None] | None = None,
    ) -> None:
        self._gateway = gateway
        self._sessions = sessions
        self._log = log
        self._on_pending_change = on_pending_change
        self._pending = False

    @property
    def is_pending(self) -> bool:
        return self._pending

    def accepts(self, question: str | None) -> bool:
        """Whether ``ask`` would dispatch this question right now."""
        return bool(question and question.strip()) and self._sessions.is_active() and not self._pending

    async def ask(self, question: str) -> bool:
        """Send a question and record the exchange in the log.

        Rejected questions (blank, no active session, or another question in
        flight) are dropped without side effects.

        Args:
            question: The user's question.

        Returns:
            True if the question was sent, False if it was rejected.
        """
        if not self.accepts(question):
            logger.debug("Question rejected (blank, no active session, or request pending)")
            return False

        text = question.strip()
        session = self._sessions.current
        self._log.append(Role.USER, text)
        self._set_pending(True)
        try:
            answer = await self._resolve(session, text)
            if self._sessions.current is session:
                self._log.append(Role.ASSISTANT, answer)
            else:
                logger.info(f"Discarding answer for superseded session {session.id}")
        finally:
            self._set_pending(False)
        return True

    async def _resolve(self, session: Session, question: str) -> str:
        try:
            return await self._gateway.submit_query(session.id, question)
        except QueryError as e:
            logger.warning(f"Query failed for session {session.id} ({e.reason.value}): {e.message}")
        except Exception:
            logger.exception(f"Unexpected error querying session {session.id}")
        return FALLBACK_ANSWER

    def _set_pending(self, pending: bool) -> None:
        self._pending = pending
        if self._on_pending_change is not None:
            self._on_pending_change()
