"""Chat history store - per-application conversations with idle expiry."""

import logging
import time
from typing import Callable

from ..models.chat import ChatHistory, ChatMessage

logger = logging.getLogger(__name__)


class ChatHistoryStore:
    """Owns every chat history, keyed by application identifier.

    Histories are only mutated through this class. Expiry is lazy: nothing
    is removed until ``sweep_expired`` runs.
    """

    def __init__(
        self,
        ttl_minutes: float = 20.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize store.

        Args:
            ttl_minutes: Idle time after which a history is dropped.
            clock: Monotonic time source in seconds.
        """
        self._ttl_seconds = ttl_minutes * 60
        self._clock = clock
        self._histories: dict[str, ChatHistory] = {}

    def get_or_create(self, app_id: str) -> ChatHistory:
        """Return the history for an application, creating it if absent."""
        return self._histories.setdefault(
            app_id, ChatHistory(app_identifier=app_id, last_active_at=self._clock())
        )

    def push(self, app_id: str, message: ChatMessage) -> None:
        self.get_or_create(app_id).push(message, now=self._clock())

    def pop(self, app_id: str) -> ChatMessage | None:
        history = self._histories.get(app_id)
        if history is None:
            return None
        return history.pop()

    def messages(self, app_id: str) -> tuple[ChatMessage, ...]:
        """Snapshot of an application's turns, oldest first."""
        history = self._histories.get(app_id)
        return history.messages if history else ()

    def delete(self, app_id: str) -> None:
        if self._histories.pop(app_id, None) is not None:
            logger.info(f"Chat history cleared for '{app_id}'")

    def sweep_expired(self) -> int:
        """Drop every history idle longer than the expiry window.

        Returns:
            Number of removed histories.
        """
        now = self._clock()
        expired = [
            app_id
            for app_id, history in self._histories.items()
            if not history.is_active(now, self._ttl_seconds)
        ]
        for app_id in expired:
            del self._histories[app_id]

        if expired:
            logger.info(f"Expired {len(expired)} idle chat histories: {expired}")
        return len(expired)

    def __contains__(self, app_id: object) -> bool:
        return app_id in self._histories

    def __len__(self) -> int:
        return len(self._histories)
