"""One-shot strategy - stateless text transformations."""

import logging
from typing import Optional

from ...config.settings import Settings
from ..models.action import ONE_SHOT_ACTIONS, ActionName, ActionRequest, GateResult
from ..models.chat import ChatMessage
from ..models.host import HostContext, ModifierState
from ..services.prompt_resolver import PromptResolver

logger = logging.getLogger(__name__)

INPUT_TEMPLATE = """{prompt}

The input text being used for this task is enclosed within triple quotation marks below the next line:

\"\"\"{text}\"\"\""""


class OneShotAction:
    """Revise, polish, translate or summarize a selection."""

    def __init__(self, action: ActionName, resolver: PromptResolver):
        """Initialize strategy.

        Args:
            action: One-shot action this instance serves.
            resolver: Prompt resolver.
        """
        action = ActionName(action)
        if action not in ONE_SHOT_ACTIONS:
            raise ValueError(f"'{action.value}' is not a one-shot action")
        self.action = action
        self._resolver = resolver

    def gate(
        self, context: HostContext, options: Settings, modifiers: ModifierState
    ) -> GateResult:
        if not options.is_enabled(self.action.value):
            logger.info(f"Action '{self.action.value}' is disabled")
            return GateResult(allow=False)
        return GateResult(allow=True)

    def build_request(
        self,
        action: ActionName,
        text: str,
        context: HostContext,
        options: Settings,
        modifiers: ModifierState,
    ) -> Optional[ActionRequest]:
        if action != self.action or not options.is_enabled(self.action.value):
            return None

        language = options.language_for(self.action.value, secondary=modifiers.shift)
        prompt = self._resolver.render(
            self._resolver.resolve(self.action, options.custom_prompts), language
        )
        return ActionRequest(
            model=options.model,
            messages=[
                ChatMessage(
                    role="user", content=INPUT_TEMPLATE.format(prompt=prompt, text=text)
                )
            ],
            temperature=options.temperature,
        )

    def post_process(self, context: HostContext, message: ChatMessage) -> str:
        return message.content.strip()

    def on_failure(self, context: HostContext) -> None:
        pass

    def cleanup(self) -> None:
        pass
