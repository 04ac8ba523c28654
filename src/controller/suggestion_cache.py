"""Client-lifetime cache of suggested questions."""

import logging

from src.client.errors import FetchError
from src.client.gateway import ResumeApiClient
from src.models.schemas import SuggestionSet

logger = logging.getLogger(__name__)


class SuggestionCache:
    """Fetches suggestions once and keeps them for the life of the client.

    Suggestions do not depend on the uploaded resume, so session resets leave
    the cache alone. A failed fetch is not retried; the suggestion panel is
    simply not shown.
    """

    def __init__(self, gateway: ResumeApiClient) -> None:
        self._gateway = gateway
        self._suggestions: SuggestionSet | None = None
        self._attempted = False

    @property
    def suggestions(self) -> SuggestionSet | None:
        return self._suggestions

    async def load(self) -> SuggestionSet | None:
        """Fetch suggestions on first call; later calls return the cached result."""
        if self._attempted:
            return self._suggestions
        self._attempted = True

        try:
            self._suggestions = await self._gateway.fetch_suggestions()
        except FetchError as e:
            logger.warning(f"Suggestions unavailable ({e.reason.value}): {e.message}")
            return None

        logger.info(
            f"Loaded suggestions: {len(self._suggestions.interview)} interview, "
            f"{len(self._suggestions.analysis)} analysis, "
            f"{len(self._suggestions.matching)} matching"
        )
        return self._suggestions
