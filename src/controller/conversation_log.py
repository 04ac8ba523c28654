"""Ordered conversation history with change subscriptions."""

import logging
from collections.abc import Callable, Iterator

from src.models import Role, Turn

logger = logging.getLogger(__name__)

TurnsListener = Callable[[tuple[Turn, ...]], None]


class ConversationLog:
    """Append-only sequence of turns, in the order they happened.

    Turns are never edited or removed one by one; the log only shrinks
    through ``clear`` or ``seed``. Listeners receive a snapshot of all turns
    after every change.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._listeners: list[TurnsListener] = []

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.turns)

    def append(self, role: Role, text: str) -> Turn:
        """Add one turn at the end of the log."""
        turn = Turn(role=role, text=text)
        self._turns.append(turn)
        self._notify()
        return turn

    def seed(self, text: str) -> Turn:
        """Replace the whole log with a single assistant turn."""
        turn = Turn(role=Role.ASSISTANT, text=text)
        self._turns = [turn]
        self._notify()
        return turn

    def clear(self) -> None:
        self._turns = []
        self._notify()

    def subscribe(self, listener: TurnsListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.turns
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Conversation listener failed")
