"""Domain models."""
from .chat import ChatMessage, ChatHistory
from .action import ActionName, ActionRequest, GateResult, ONE_SHOT_ACTIONS, ACTION_TITLES
from .host import HostContext, ModifierState

__all__ = [
    "ChatMessage",
    "ChatHistory",
    "ActionName",
    "ActionRequest",
    "GateResult",
    "ONE_SHOT_ACTIONS",
    "ACTION_TITLES",
    "HostContext",
    "ModifierState",
]
