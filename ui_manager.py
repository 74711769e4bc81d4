"""
UI Manager module.

Handles view initialization and navigation.
"""

import logging
from typing import List, Optional

import flet as ft

from app_layout import AppLayout
from app_state import state
from form_data import FormData
from views.base_view import BaseView
from views.generator_view import GeneratorView
from views.settings_view import SettingsView

logger = logging.getLogger(__name__)


class UIManager:
    """
    Manages the application's views and layout.
    """

    def __init__(self, page: ft.Page):
        self.page = page
        self.generator_view: Optional[GeneratorView] = None
        self.settings_view: Optional[SettingsView] = None

        self.views_list: List[BaseView] = []
        self.app_layout: Optional[AppLayout] = None
        self.current_view_index = 0

    # pylint: disable=too-many-arguments, too-many-positional-arguments
    def initialize_views(
        self,
        on_field_change_callback,
        on_generate_secret_callback,
        on_generate_code_callback,
        on_copy_callback,
        form_data: FormData,
    ):
        """Initialize all views with their dependencies."""
        logger.debug("Initializing views...")

        self.generator_view = GeneratorView(
            on_field_change_callback,
            on_generate_secret_callback,
            on_generate_code_callback,
            on_copy_callback,
            form_data,
        )
        self.settings_view = SettingsView(state.config)

        # Match the order in AppLayout.destinations
        self.views_list = [self.generator_view, self.settings_view]

        def on_nav_change(e):
            self.navigate_to(e.control.selected_index)

        self.app_layout = AppLayout(on_nav_change)
        self.app_layout.set_content(self.generator_view)
        return self.app_layout

    def navigate_to(self, index: int):
        """Navigate to the specified view index."""
        if self.app_layout and 0 <= index < len(self.views_list):
            logger.debug("Navigating to view index: %d", index)
            self.current_view_index = index
            self.app_layout.set_content(self.views_list[index])
            self.app_layout.set_navigation_index(index)
            self.page.update()
