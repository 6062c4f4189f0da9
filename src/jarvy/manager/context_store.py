"""Per-user conversation contexts.

Contexts are created lazily with default preferences. Each user has its
own lock; callers mutate a context only inside session().
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from jarvy.models.context import ConversationContext

logger = logging.getLogger(__name__)


class ContextStore:
    """In-memory map of user id -> ConversationContext."""

    def __init__(self) -> None:
        self._contexts: dict[str, ConversationContext] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._contexts)

    def get(self, user_id: str) -> ConversationContext | None:
        return self._contexts.get(user_id)

    def get_or_create(self, user_id: str) -> ConversationContext:
        """Get a user's context, creating a default one if none exists."""
        with self._lock:
            context = self._contexts.get(user_id)
            if context is None:
                context = ConversationContext(user_id=user_id)
                self._contexts[user_id] = context
                self._locks[user_id] = threading.RLock()
                logger.debug(f"Created conversation context for {user_id}")
            return context

    @contextmanager
    def session(self, user_id: str) -> Iterator[ConversationContext]:
        """Hold the user's lock while working with their context."""
        context = self.get_or_create(user_id)
        with self._locks[user_id]:
            yield context

    def record_satisfaction(self, user_id: str, satisfaction: float) -> bool:
        """Attach a satisfaction score to the user's latest turn.

        Returns:
            True if there was a turn to annotate
        """
        if user_id not in self._contexts:
            return False
        with self.session(user_id) as context:
            if not context.history:
                return False
            context.history[-1].satisfaction = satisfaction
            return True

    def clear(self) -> None:
        with self._lock:
            self._contexts.clear()
            self._locks.clear()

    def export(self) -> list[dict[str, Any]]:
        return [c.model_dump(mode="json") for c in list(self._contexts.values())]

    def load(self, contexts: Iterable[ConversationContext]) -> None:
        with self._lock:
            self._contexts = {c.user_id: c for c in contexts}
            self._locks = {user_id: threading.RLock() for user_id in self._contexts}
