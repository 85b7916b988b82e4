"""Action strategies."""
from .conversational import ConversationalAction
from .one_shot import OneShotAction

__all__ = [
    "ConversationalAction",
    "OneShotAction",
]
