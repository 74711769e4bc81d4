"""
Clipboard writer module.

Copies generated code to the clipboard by trying an ordered list of
strategies: the clipboard of the running Flet session first, then the
system clipboard through pyperclip.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pyperclip

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyResult:
    """Outcome of a copy attempt."""

    success: bool
    strategy: Optional[str] = None


class ClipboardStrategy:
    """One way of writing text to a clipboard."""

    name = "base"

    def copy(self, text: str) -> bool:
        raise NotImplementedError


class PageClipboardStrategy(ClipboardStrategy):
    """Clipboard of the client attached to a Flet page (desktop or browser)."""

    name = "page"

    def __init__(self, page):
        self.page = page

    def copy(self, text: str) -> bool:
        if self.page is None:
            logger.debug("No page attached, skipping page clipboard")
            return False
        self.page.set_clipboard(text)

        # set_clipboard does not wait for the client; read back to confirm
        try:
            current = self.page.get_clipboard()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Could not read back page clipboard: %s", e)
            return False
        if current != text:
            logger.warning("Page clipboard write was not applied by the client")
            return False
        return True


class PyperclipStrategy(ClipboardStrategy):
    """System clipboard of the host running the app."""

    name = "pyperclip"

    def copy(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("System clipboard not available: %s", e)
            return False
        return True


class ClipboardWriter:
    """Tries each strategy in order and stops at the first success."""

    def __init__(self, strategies: Iterable[ClipboardStrategy]):
        self.strategies: List[ClipboardStrategy] = list(strategies)

    @classmethod
    def for_page(cls, page) -> "ClipboardWriter":
        return cls([PageClipboardStrategy(page), PyperclipStrategy()])

    def copy(self, text: str) -> CopyResult:
        if not text:
            logger.warning("Nothing to copy")
            return CopyResult(False)

        for strategy in self.strategies:
            try:
                copied = strategy.copy(text)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.warning("Clipboard strategy '%s' failed: %s", strategy.name, e)
                continue

            if copied:
                logger.info(
                    "Copied %d chars using '%s' clipboard", len(text), strategy.name
                )
                return CopyResult(True, strategy.name)
            logger.debug("Clipboard strategy '%s' declined", strategy.name)

        logger.error("Failed to copy: all clipboard strategies failed")
        return CopyResult(False)
