"""Protocol interfaces for dependency injection."""
from .llm import LLMProtocol
from .host import HostProtocol
from .action import ActionStrategyProtocol

__all__ = [
    "LLMProtocol",
    "HostProtocol",
    "ActionStrategyProtocol",
]
