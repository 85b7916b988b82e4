"""Chat domain models."""
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChatMessage:
    """Chat message."""
    role: str  # "user" | "assistant" | "system"
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatHistory:
    """Ordered turns of one application's conversation."""
    app_identifier: str
    last_active_at: float = field(default_factory=time.monotonic)
    _messages: list[ChatMessage] = field(default_factory=list, repr=False)

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def push(self, message: ChatMessage, now: float) -> None:
        """Append a turn and mark the history active."""
        self._messages.append(message)
        self.last_active_at = now

    def pop(self) -> ChatMessage | None:
        """Remove the most recent turn."""
        if not self._messages:
            return None
        return self._messages.pop()

    def is_active(self, now: float, ttl_seconds: float) -> bool:
        return now - self.last_active_at < ttl_seconds

    def __len__(self) -> int:
        return len(self._messages)
