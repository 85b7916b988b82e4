import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def configure_container(settings: Settings, target: Container | None = None) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to fill; the module-level one by default.

    Returns:
        Configured container.
    """
    from .core.models.action import ONE_SHOT_ACTIONS, ActionName
    from .core.services.dispatcher import ActionDispatcher
    from .core.services.history_store import ChatHistoryStore
    from .core.services.output_router import OutputRouter
    from .core.services.prompt_resolver import PromptResolver
    from .core.strategies.conversational import ConversationalAction
    from .core.strategies.one_shot import OneShotAction
    from .infrastructure.llm.openai_client import create_completions_client

    target = target if target is not None else container

    target.register(
        ChatHistoryStore,
        lambda: ChatHistoryStore(ttl_minutes=settings.chat_history_ttl_minutes),
        singleton=True,
    )

    target.register(PromptResolver, PromptResolver, singleton=True)

    target.register(
        OutputRouter,
        lambda: OutputRouter(terminal_apps=settings.terminal_apps),
        singleton=True,
    )

    def build_dispatcher() -> ActionDispatcher:
        resolver = target.resolve(PromptResolver)
        strategies = {
            ActionName.CHAT: ConversationalAction(target.resolve(ChatHistoryStore)),
        }
        for action in ONE_SHOT_ACTIONS:
            strategies[action] = OneShotAction(action, resolver)
        return ActionDispatcher(
            strategies=strategies,
            output_router=target.resolve(OutputRouter),
            client_factory=create_completions_client,
        )

    target.register(ActionDispatcher, build_dispatcher, singleton=True)

    logger.info("Container configured")
    return target
