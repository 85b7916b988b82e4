"""Action dispatcher - gate, request, place the result."""

import logging
from typing import Callable, Mapping

from ...config.settings import Settings
from ..errors import ActionWiringError, CompletionError, ConfigurationError
from ..models.action import ActionName
from ..models.host import HostContext, ModifierState
from ..protocols.action import ActionStrategyProtocol
from ..protocols.host import HostProtocol
from ..protocols.llm import LLMProtocol
from .output_router import OutputRouter

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Runs one action invocation from gate to output placement."""

    def __init__(
        self,
        strategies: Mapping[ActionName, ActionStrategyProtocol],
        output_router: OutputRouter,
        client_factory: Callable[[Settings], LLMProtocol],
    ):
        """Initialize dispatcher.

        Args:
            strategies: Strategy per action name.
            output_router: Output router.
            client_factory: Builds a completions client from options. May
                raise ConfigurationError.
        """
        self._strategies = dict(strategies)
        self._router = output_router
        self._client_factory = client_factory

    @property
    def actions(self) -> list[ActionName]:
        return list(self._strategies)

    def cleanup(self) -> None:
        """Run maintenance on every distinct strategy."""
        seen: set[int] = set()
        for strategy in self._strategies.values():
            if id(strategy) in seen:
                continue
            seen.add(id(strategy))
            strategy.cleanup()

    async def dispatch(
        self,
        action: ActionName | str,
        text: str,
        options: Settings,
        modifiers: ModifierState,
        context: HostContext,
        host: HostProtocol,
    ) -> None:
        """Handle one user gesture.

        Flow:
            1. Sweep expired state on every strategy
            2. Gate - a refusal ends the invocation without a network call
            3. Build the request and send it once
            4. Post-process and place the result, or compensate and report

        Args:
            action: Action name.
            text: Selected input text.
            options: User options for this invocation.
            modifiers: Held modifiers.
            context: Calling application.
            host: Host receiving the output.

        Raises:
            ValueError: Unknown action name.
            KeyError: No strategy registered for the action.
            ConfigurationError: Options cannot produce a client.
            ActionWiringError: Strategy does not serve the action.
        """
        self.cleanup()

        action = ActionName(action)
        strategy = self._strategies[action]

        guard = strategy.gate(context, options, modifiers)
        if not guard.allow:
            logger.info(f"[{action.value}] Refused by gate for '{context.app_identifier}'")
            if guard.message:
                host.show_text(guard.message)
                host.show_success()
            return

        request = strategy.build_request(action, text, context, options, modifiers)
        if request is None:
            raise ActionWiringError(
                f"{type(strategy).__name__} cannot build a request for '{action.value}'"
            )

        try:
            client = self._client_factory(options)
        except ConfigurationError as e:
            logger.error(f"[{action.value}] Configuration error: {e}")
            strategy.on_failure(context)
            host.show_text(str(e))
            host.show_failure()
            raise

        logger.info(
            f"[{action.value}] Sending {len(request.messages)} messages "
            f"to model '{request.model}'"
        )
        try:
            message = await client.complete(request)
            result = strategy.post_process(context, message)
        except CompletionError as e:
            logger.error(f"[{action.value}] Request failed: {e}")
            strategy.on_failure(context)
            host.show_text(str(e))
            host.show_failure()
            return
        finally:
            await client.aclose()

        self._router.place(result, text, context, modifiers, host)
