"""Conversation controller for the resume chat client.

Responsibilities:
    - Session lifecycle (upload creates, "New Resume" resets)
    - Ordered conversation history with change notifications
    - One-question-at-a-time query loop with stale answer discarding
    - Suggested questions cached for the client's lifetime

The only stateful part of the client. The UI reads from it and calls into
it but never mutates its state directly.
"""

from src.controller.chat_controller import SEED_SUFFIX, ResumeChatController
from src.controller.conversation_log import ConversationLog
from src.controller.query_pipeline import FALLBACK_ANSWER, QueryPipeline
from src.controller.session_store import SessionStore
from src.controller.suggestion_cache import SuggestionCache

__all__ = [
    "FALLBACK_ANSWER",
    "SEED_SUFFIX",
    "ConversationLog",
    "QueryPipeline",
    "ResumeChatController",
    "SessionStore",
    "SuggestionCache",
]
