"""Single-session store for the conversation controller."""

import logging

from src.models import Session, SessionStatus

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the client's one session and its NONE/ACTIVE status.

    ``create`` always supersedes the previous session, even an active one.
    Every call produces a new Session object, so identity comparison tells
    sessions apart even if the backend reuses an id.
    """

    def __init__(self) -> None:
        self._current = Session()

    @property
    def current(self) -> Session:
        return self._current

    @property
    def session_id(self) -> str | None:
        return self._current.id

    def is_active(self) -> bool:
        return self._current.is_active

    def create(self, session_id: str) -> Session:
        """Activate a new session.

        Args:
            session_id: Identifier returned by a successful upload.

        Returns:
            The new ACTIVE session.

        Raises:
            ValueError: If the id is empty.
        """
        if not session_id or not session_id.strip():
            raise ValueError("Session id is required")

        if self._current.is_active:
            logger.info(f"Session {self._current.id} superseded by {session_id}")
        self._current = Session(id=session_id, status=SessionStatus.ACTIVE)
        logger.info(f"Session {session_id} active")
        return self._current

    def reset(self) -> Session:
        """Drop the current session, if any."""
        if self._current.is_active:
            logger.info(f"Session {self._current.id} reset")
        self._current = Session()
        return self._current
