"""Action strategy protocol."""
from typing import Optional, Protocol, runtime_checkable

from ...config.settings import Settings
from ..models.action import ActionName, ActionRequest, GateResult
from ..models.chat import ChatMessage
from ..models.host import HostContext, ModifierState


@runtime_checkable
class ActionStrategyProtocol(Protocol):
    """Per-action contract driven by the dispatcher."""

    def gate(
        self, context: HostContext, options: Settings, modifiers: ModifierState
    ) -> GateResult:
        """Decide whether to proceed before any network call."""
        ...

    def build_request(
        self,
        action: ActionName,
        text: str,
        context: HostContext,
        options: Settings,
        modifiers: ModifierState,
    ) -> Optional[ActionRequest]:
        """Build the request body.

        Returns:
            None if the action is not served by this strategy.
        """
        ...

    def post_process(self, context: HostContext, message: ChatMessage) -> str:
        """Turn the assistant message into the final text."""
        ...

    def on_failure(self, context: HostContext) -> None:
        """Compensate after a failed request."""
        ...

    def cleanup(self) -> None:
        """Periodic maintenance, run at the start of every dispatch."""
        ...
