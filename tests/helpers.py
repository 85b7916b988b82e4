"""Shared test stubs."""

from typing import Any, Optional

from chatgptx.config.settings import Settings
from chatgptx.core.models.action import ActionRequest
from chatgptx.core.models.chat import ChatMessage


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingHost:
    """Host stub that records every call in order."""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.calls: list[tuple[str, Any]] = []

    def paste_text(self, text: str, restore: bool = True) -> bool:
        self.calls.append(("paste", text, restore))
        return self.accept

    def copy_text(self, text: str, notify: bool = True) -> bool:
        self.calls.append(("copy", text))
        return self.accept

    def show_text(self, text: str, preview: bool = False, style: Optional[str] = None) -> None:
        self.calls.append(("show", text, preview))

    def show_success(self) -> None:
        self.calls.append(("success",))

    def show_failure(self) -> None:
        self.calls.append(("failure",))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakeLLM:
    """Completions client returning canned replies or raising."""

    def __init__(self, replies: list[Any] | None = None):
        self._replies = list(replies or [])
        self.requests: list[ActionRequest] = []
        self.closed = 0

    async def complete(self, request: ActionRequest) -> ChatMessage:
        self.requests.append(request)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return ChatMessage(role="assistant", content=reply)

    async def aclose(self) -> None:
        self.closed += 1


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"api_key": "sk-test", "model": "gpt-test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


