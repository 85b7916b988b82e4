import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class ConsoleHost:
    """Host that writes results to a text stream instead of a clipboard.

    Keeps what it was asked to do, so callers can inspect the outcome.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout
        self.pasted: list[str] = []
        self.copied: list[str] = []
        self.succeeded = False
        self.failed = False

    def paste_text(self, text: str, restore: bool = True) -> bool:
        self.pasted.append(text)
        self._stream.write(text)
        self._stream.flush()
        return True

    def copy_text(self, text: str, notify: bool = True) -> bool:
        self.copied.append(text)
        if notify:
            logger.info(f"Copied {len(text)} chars")
        return True

    def show_text(
        self, text: str, preview: bool = False, style: Optional[str] = None
    ) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()

    def show_success(self) -> None:
        self.succeeded = True

    def show_failure(self) -> None:
        self.failed = True
        logger.error("Action failed")
