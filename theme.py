"""
Application theme definitions and constants.
"""

from typing import Any, Dict, Optional

import flet as ft


class Theme:
    """
    Colour palette and theme factories.
    Gray surfaces with indigo accents.
    """

    # --- Colors ---
    PRIMARY = "#6366F1"  # Indigo 500
    PRIMARY_DARK = "#4F46E5"  # Indigo 600

    BG_DARK = "#111827"  # Gray 900
    BG_CARD = "#1F2937"  # Gray 800
    BG_HOVER = "#374151"  # Gray 700
    BG_INPUT = "#1F2937"
    BG_CODE = "#030712"  # Gray 950

    TEXT_PRIMARY = "#FFFFFF"
    TEXT_MUTED = "#9CA3AF"  # Gray 400

    ERROR = "#EF4444"

    BORDER = "#4B5563"  # Gray 600
    DIVIDER = "#374151"

    CODE_FONT = "monospace"

    # pylint: disable=too-few-public-methods
    class Status:
        """Status color definitions."""

        ERROR = "#EF4444"

    @staticmethod
    def get_high_contrast_theme() -> ft.Theme:
        """Returns the High Contrast Theme object."""
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=ft.Colors.YELLOW_400,
                secondary=ft.Colors.CYAN_400,
                surface=ft.Colors.BLACK,
                error=ft.Colors.RED_500,
                on_primary=ft.Colors.BLACK,
                on_secondary=ft.Colors.BLACK,
                on_surface=ft.Colors.WHITE,
                surface_tint=ft.Colors.TRANSPARENT,
                outline=ft.Colors.WHITE,
            ),
            scrollbar_theme=ft.ScrollbarTheme(
                thumb_color=ft.Colors.WHITE,
                radius=0,
                thickness=10,
                interactive=True,
            ),
        )

    @staticmethod
    def get_theme() -> ft.Theme:
        """Returns the Flet Theme object configured with application colors."""
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=Theme.PRIMARY,
                secondary=Theme.PRIMARY_DARK,
                surface=Theme.BG_DARK,
                error=Theme.ERROR,
                on_primary=Theme.TEXT_PRIMARY,
                on_secondary=Theme.TEXT_PRIMARY,
                on_surface=Theme.TEXT_PRIMARY,
                surface_tint=ft.Colors.TRANSPARENT,
                outline=Theme.BORDER,
            ),
            scrollbar_theme=ft.ScrollbarTheme(
                thumb_color=Theme.BG_HOVER,
                radius=4,
                thickness=6,
                interactive=True,
            ),
        )

    @staticmethod
    def get_input_decoration(
        hint_text: str = "", prefix_icon: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Standardized Input Decoration properties.
        Returns a dictionary of properties to be unpacked into a TextField.
        """
        return {
            "filled": True,
            "bgcolor": Theme.BG_INPUT,
            "hint_text": hint_text,
            "hint_style": ft.TextStyle(color=Theme.TEXT_MUTED),
            "border": ft.InputBorder.OUTLINE,
            "border_color": Theme.BORDER,
            "focused_border_color": Theme.PRIMARY,
            "focused_border_width": 1,
            "content_padding": 15,
            "prefix_icon": prefix_icon,
            "dense": True,
            "border_radius": 6,
        }

    @staticmethod
    def get_card_decoration() -> Dict[str, Any]:
        return {
            "bgcolor": Theme.BG_CARD,
            "border_radius": 8,
            "padding": 20,
            "border": ft.border.all(1, Theme.BORDER),
        }
