"""
Transient status text shown on the copy button.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = 2.0


class StatusMessage:
    """
    Holds the visible status and resets it to an empty string
    `clear_after` seconds after the last `show`.
    """

    def __init__(
        self,
        on_change: Optional[Callable[[str], None]] = None,
        clear_after: float = DEFAULT_CLEAR_AFTER,
    ):
        self.on_change = on_change
        self.clear_after = clear_after
        self.text = ""
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    def show(self, text: str):
        """Set the status and schedule its reset."""
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self.text = text
            timer = threading.Timer(
                self.clear_after, self._expire, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
        self._notify(text)
        timer.start()

    def clear(self):
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            if not self.text:
                return
            self.text = ""
        self._notify("")

    def _expire(self, generation: int):
        """Timer callback; a reset scheduled by an older `show` is ignored."""
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            if not self.text:
                return
            self.text = ""
        self._notify("")

    def cancel(self):
        """Drop any pending reset without touching the text."""
        with self._lock:
            self._cancel_timer()

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self, text: str):
        if self.on_change is None:
            return
        try:
            self.on_change(text)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to update status display: %s", e)
