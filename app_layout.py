"""
AppLayout module.
Main layout structure: navigation rail on the left, active view on the right.
"""

import flet as ft

from localization_manager import LocalizationManager as LM
from theme import Theme


class AppLayout(ft.Row):
    """
    Main application layout using a Row of [Sidebar, Content].
    """

    def __init__(self, on_nav_change):
        super().__init__()
        self.on_nav_change = on_nav_change
        self.expand = True
        self.spacing = 0

        self.destinations = [
            ft.NavigationRailDestination(
                icon=ft.Icons.CODE,
                selected_icon=ft.Icons.CODE_ROUNDED,
                label=LM.get("generator"),
            ),
            ft.NavigationRailDestination(
                icon=ft.Icons.SETTINGS,
                selected_icon=ft.Icons.SETTINGS_SUGGEST,
                label=LM.get("settings"),
            ),
        ]

        self.rail = ft.NavigationRail(
            selected_index=0,  # type: ignore
            label_type=ft.NavigationRailLabelType.ALL,
            on_change=self.on_nav_change,
            destinations=self.destinations,
            bgcolor=Theme.BG_CARD,
            min_width=72,
            group_alignment=-0.9,
        )

        self.content_area = ft.Container(
            expand=True,
            bgcolor=Theme.BG_DARK,
            content=ft.Column(),  # Placeholder
        )

        self.controls = [
            self.rail,
            ft.Container(width=1, bgcolor=Theme.DIVIDER),
            self.content_area,
        ]

    def set_content(self, view_control: ft.Control):
        """Updates the main content area."""
        self.content_area.content = view_control
        if self.page:
            self.content_area.update()

    def set_navigation_index(self, index: int):
        """Sets the selected navigation index programmatically."""
        self.rail.selected_index = index  # type: ignore
        if self.page:
            self.rail.update()
