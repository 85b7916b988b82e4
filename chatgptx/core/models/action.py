"""Action domain models."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .chat import ChatMessage


class ActionName(str, Enum):
    """Actions the extension offers."""
    CHAT = "chat"
    REVISE = "revise"
    POLISH = "polish"
    TRANSLATE = "translate"
    SUMMARIZE = "summarize"


ONE_SHOT_ACTIONS = (
    ActionName.REVISE,
    ActionName.POLISH,
    ActionName.TRANSLATE,
    ActionName.SUMMARIZE,
)

ACTION_TITLES = {
    ActionName.CHAT: "do what you want (hold shift to clear the history for this app)",
    ActionName.REVISE: "revise text (hold shift to use the secondary language)",
    ActionName.POLISH: "polish text (hold shift to use the secondary language)",
    ActionName.TRANSLATE: "translate text (hold shift to use the secondary language)",
    ActionName.SUMMARIZE: "summarize text (hold shift to use the secondary language)",
}


@dataclass
class GateResult:
    """Outcome of the pre-flight check."""
    allow: bool
    message: Optional[str] = None


@dataclass
class ActionRequest:
    """Chat-completions request body."""
    model: str
    messages: list[ChatMessage]
    temperature: Optional[float] = None

    def to_payload(self) -> dict:
        """Render the JSON body, leaving out unset fields."""
        payload: dict = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        return payload
