"""
Main application entry point.

Initializes logging, preferences and the UI, then starts the Flet app
as a desktop window or, with FLET_WEB set, in the browser.
"""

import logging
import os
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

import flet as ft

from app_controller import AppController
from app_state import state
from localization_manager import LocalizationManager as LM
from logger_config import setup_logging
from theme import Theme
from ui_manager import UIManager
from ui_utils import UIConstants, theme_mode_from_string

# Setup logging immediately
setup_logging()
logger = logging.getLogger(__name__)

# Global instances
UI: Optional[UIManager] = None
PAGE: Optional[ft.Page] = None
CONTROLLER: Optional[AppController] = None


def main(pg: ft.Page):
    """Build the page for one session."""
    # pylint: disable=global-statement
    global PAGE, UI, CONTROLLER
    PAGE = pg

    logger.info("Initializing main UI...")
    LM.load_language(state.config.get("language", "pt"))

    PAGE.title = LM.get("app_title")
    PAGE.theme_mode = theme_mode_from_string(state.config.get("theme_mode"))
    PAGE.padding = 0
    PAGE.window.min_width = UIConstants.WINDOW_MIN_WIDTH
    PAGE.window.min_height = UIConstants.WINDOW_MIN_HEIGHT
    PAGE.bgcolor = Theme.BG_DARK
    PAGE.theme = (
        Theme.get_high_contrast_theme() if state.high_contrast else Theme.get_theme()
    )

    UI = UIManager(PAGE)
    CONTROLLER = AppController(PAGE, UI)

    main_view = UI.initialize_views(
        on_field_change_callback=CONTROLLER.on_field_change,
        on_generate_secret_callback=CONTROLLER.on_generate_secret,
        on_generate_code_callback=CONTROLLER.on_generate_code,
        on_copy_callback=CONTROLLER.on_copy,
        form_data=CONTROLLER.form_data,
    )

    PAGE.add(main_view)
    logger.info("Main view added to page.")

    def cleanup_on_disconnect(e):
        # pylint: disable=unused-argument
        logger.info("Page disconnected, cleaning up...")
        if CONTROLLER:
            CONTROLLER.cleanup()

    PAGE.on_disconnect = cleanup_on_disconnect
    PAGE.on_close = cleanup_on_disconnect


def global_crash_handler(exctype, value, tb):
    """
    Global hook to catch any unhandled exception and record it before exiting.
    """
    error_trace = "".join(traceback.format_exception(exctype, value, tb))
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    crash_report = (
        f"N8NSTACK CRASH REPORT [{timestamp}]\n"
        f"{'-'*50}\n"
        f"Type: {exctype.__name__}\n"
        f"Message: {value}\n\n"
        f"Traceback:\n{error_trace}\n"
        f"{'-'*50}\n\n"
    )

    log_path = Path.home() / ".n8nstack" / "crash.log"
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(
            log_path, "a", encoding="utf-8", opener=lambda p, f: os.open(p, f, 0o600)
        ) as f:
            f.write(crash_report)
    except OSError:
        log_path = Path("crash.log")
        try:
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(crash_report)
        except OSError:
            pass

    logger.critical("=" * 60)
    logger.critical("CRITICAL ERROR - APPLICATION CRASHED")
    logger.critical(crash_report)
    logger.critical("Crash report saved to %s", log_path)
    logger.critical("=" * 60)

    sys.exit(1)


if __name__ == "__main__":
    if "--console" in sys.argv or "--debug" in sys.argv:
        logger.info("Console mode enabled - all output will be visible")

    sys.excepthook = global_crash_handler

    logger.info("=" * 60)
    logger.info("n8n Stack Config Generator starting...")
    logger.info("Python: %s", sys.version)
    logger.info("Working Directory: %s", os.getcwd())
    logger.info("=" * 60)

    if os.environ.get("FLET_WEB"):
        ft.app(target=main, view=ft.AppView.WEB_BROWSER, port=UIConstants.WEB_PORT)
    else:
        try:
            ft.app(target=main)
        except Exception as e:  # pylint: disable=broad-exception-caught
            global_crash_handler(type(e), e, e.__traceback__)
