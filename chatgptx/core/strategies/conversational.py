"""Conversational strategy - chat with per-application memory."""

import logging
from typing import Optional

from ...config.settings import Settings
from ..models.action import ActionName, ActionRequest, GateResult
from ..models.chat import ChatMessage
from ..models.host import HostContext, ModifierState
from ..services.history_store import ChatHistoryStore

logger = logging.getLogger(__name__)


class ConversationalAction:
    """Sends the whole history of the calling application on every turn.

    A user turn is pushed when the request is built and popped again if the
    request fails, so the history only holds exchanges the backend answered.
    """

    action = ActionName.CHAT

    def __init__(self, store: ChatHistoryStore):
        """Initialize strategy.

        Args:
            store: History store shared by every chat invocation.
        """
        self._store = store

    def gate(
        self, context: HostContext, options: Settings, modifiers: ModifierState
    ) -> GateResult:
        if modifiers.shift:
            self._store.delete(context.app_identifier)
            return GateResult(
                allow=False,
                message=(
                    f"{context.app_name}({context.app_identifier})'s "
                    "chat history has been cleared"
                ),
            )
        return GateResult(allow=True)

    def build_request(
        self,
        action: ActionName,
        text: str,
        context: HostContext,
        options: Settings,
        modifiers: ModifierState,
    ) -> Optional[ActionRequest]:
        if action != self.action:
            return None

        self._store.push(context.app_identifier, ChatMessage(role="user", content=text))
        return ActionRequest(
            model=options.model,
            messages=list(self._store.messages(context.app_identifier)),
            temperature=options.temperature,
        )

    def post_process(self, context: HostContext, message: ChatMessage) -> str:
        self._store.push(context.app_identifier, message)
        return message.content.strip()

    def on_failure(self, context: HostContext) -> None:
        dropped = self._store.pop(context.app_identifier)
        if dropped is not None:
            logger.info(
                f"Dropped unanswered {dropped.role} turn for '{context.app_identifier}'"
            )

    def cleanup(self) -> None:
        self._store.sweep_expired()
