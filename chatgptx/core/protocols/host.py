"""Host protocol: what the surrounding application does with results."""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HostProtocol(Protocol):
    """Protocol for the clipboard host."""

    def paste_text(self, text: str, restore: bool = True) -> bool:
        """Paste text into the active application.

        Args:
            text: Text to paste.
            restore: Restore the previous clipboard contents afterwards.

        Returns:
            True if the host accepted the paste.
        """
        ...

    def copy_text(self, text: str, notify: bool = True) -> bool:
        """Copy text to the clipboard."""
        ...

    def show_text(
        self, text: str, preview: bool = False, style: Optional[str] = None
    ) -> None:
        """Display text to the user."""
        ...

    def show_success(self) -> None:
        ...

    def show_failure(self) -> None:
        ...
