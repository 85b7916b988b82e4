"""Core business services."""
from .history_store import ChatHistoryStore
from .prompt_resolver import PromptResolver
from .output_router import OutputRouter
from .dispatcher import ActionDispatcher

__all__ = [
    "ChatHistoryStore",
    "PromptResolver",
    "OutputRouter",
    "ActionDispatcher",
]
