"""Output router - places a result back into the host."""

import logging
from typing import Iterable

from ..models.host import HostContext, ModifierState
from ..protocols.host import HostProtocol

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_APPS = ("iTerm2", "Terminal")


class OutputRouter:
    """Decides between pasting and copy-plus-preview."""

    def __init__(self, terminal_apps: Iterable[str] = DEFAULT_TERMINAL_APPS):
        self._terminal_apps = frozenset(terminal_apps)

    def is_terminal(self, app_name: str) -> bool:
        return app_name in self._terminal_apps

    def place(
        self,
        result: str,
        original: str,
        context: HostContext,
        modifiers: ModifierState,
        host: HostProtocol,
    ) -> None:
        """Paste the result, or copy and preview it.

        Args:
            result: Final reply text.
            original: Selected input text.
            context: Calling application.
            modifiers: Held modifiers; option forces the preview.
            host: Host to act on.
        """
        if modifiers.option or not context.can_paste:
            accepted = host.copy_text(result, notify=True)
            host.show_text(result, preview=True, style="compact")
        else:
            to_paste = f"\n\n{result}\n"
            # Pasting replaces the selection; keep the original visible unless
            # a terminal would execute it again.
            if not self.is_terminal(context.app_name) and context.can_copy:
                to_paste = f"{original}\n\n{result}\n"
            accepted = host.paste_text(to_paste, restore=True)

        if accepted:
            host.show_success()
        else:
            logger.error(f"Host refused the result for '{context.app_name}'")
            host.show_failure()
