"""
Utilities for UI components.
"""

import logging
from typing import Optional

import flet as ft

from theme import Theme

logger = logging.getLogger(__name__)


# pylint: disable=too-few-public-methods
class UIConstants:
    """Class to hold UI-related constants."""

    WINDOW_MIN_WIDTH = 720
    WINDOW_MIN_HEIGHT = 760
    FIELD_HEIGHT = 48
    GENERATE_BUTTON_WIDTH = 128
    WEB_PORT = 8550


def show_snackbar(page: Optional[ft.Page], message: str, error: bool = False) -> bool:
    """Open a SnackBar on `page`. Returns False when there is no page."""
    if page is None:
        logger.debug("No page to show message: %s", message)
        return False
    page.open(
        ft.SnackBar(
            content=ft.Text(message),
            bgcolor=Theme.Status.ERROR if error else None,
        )
    )
    return True


def theme_mode_from_string(mode: Optional[str]) -> ft.ThemeMode:
    """Map a stored theme preference to a Flet ThemeMode."""
    mode = (mode or "").lower()
    if mode == "light":
        return ft.ThemeMode.LIGHT
    if mode == "system":
        return ft.ThemeMode.SYSTEM
    return ft.ThemeMode.DARK


def parse_positive_int(value) -> Optional[int]:
    """Parse text input into a positive int, or None."""
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None
