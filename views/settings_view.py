"""Settings View"""

import logging

import flet as ft

from config_manager import ConfigManager
from localization_manager import LocalizationManager as LM
from secret_generator import validate_secret_length
from theme import Theme
from ui_utils import parse_positive_int, show_snackbar, theme_mode_from_string

from .base_view import BaseView

# pylint: disable=missing-class-docstring, too-many-instance-attributes


class SettingsView(BaseView):
    def __init__(self, config):
        super().__init__(LM.get("settings"), ft.Icons.SETTINGS)
        self.config = config
        self.logger = logging.getLogger(__name__)

        language_names = {
            "en": LM.get("language_name_en"),
            "pt": LM.get("language_name_pt"),
        }
        self.language_dd = ft.Dropdown(
            label=LM.get("language"),
            options=[
                ft.dropdown.Option(code, language_names.get(code, code))
                for code in LM.get_available_languages()
            ],
            value=self.config.get("language", "pt"),
            **Theme.get_input_decoration(prefix_icon=ft.Icons.LANGUAGE),
        )

        self.secret_length_input = ft.TextField(
            label=LM.get("secret_length"),
            value=str(self.config.get("secret_length", 32)),
            keyboard_type=ft.KeyboardType.NUMBER,
            input_filter=ft.NumbersOnlyInputFilter(),
            **Theme.get_input_decoration(prefix_icon=ft.Icons.PASSWORD),
        )

        self.theme_mode_dd = ft.Dropdown(
            label=LM.get("theme_mode"),
            options=[
                ft.dropdown.Option("Dark", LM.get("dark")),
                ft.dropdown.Option("Light", LM.get("light")),
                ft.dropdown.Option("System", LM.get("system")),
            ],
            value=self.config.get("theme_mode", "Dark"),
            on_change=self._on_theme_change,
            **Theme.get_input_decoration(prefix_icon=ft.Icons.BRIGHTNESS_6),
        )

        self.high_contrast_switch = ft.Switch(
            label=LM.get("high_contrast_mode"),
            value=self.config.get("high_contrast", False),
            active_color=Theme.PRIMARY,
            on_change=self._on_high_contrast_change,
        )

        self.save_btn = ft.ElevatedButton(
            LM.get("save_settings"),
            on_click=self.save_settings,
            icon=ft.Icons.SAVE,
            bgcolor=Theme.PRIMARY,
            color=Theme.TEXT_PRIMARY,
            style=ft.ButtonStyle(padding=20, shape=ft.RoundedRectangleBorder(radius=8)),
        )

        def create_section(title, controls):
            return ft.Container(
                content=ft.Column(
                    [
                        ft.Text(
                            title,
                            size=18,
                            weight=ft.FontWeight.BOLD,
                            color=Theme.TEXT_PRIMARY,
                        ),
                        ft.Column(controls, spacing=15),
                    ],
                    spacing=15,
                ),
                **Theme.get_card_decoration(),
            )

        self.add_control(
            create_section(
                LM.get("general_settings"),
                [self.language_dd, self.secret_length_input],
            )
        )
        self.add_control(
            create_section(
                LM.get("appearance"),
                [self.theme_mode_dd, self.high_contrast_switch],
            )
        )
        self.add_control(
            ft.Container(
                content=self.save_btn,
                alignment=ft.alignment.center_right,
                padding=ft.padding.only(top=10),
            )
        )

    # pylint: disable=unused-argument
    def _on_theme_change(self, e):
        if self.page:
            self.page.theme_mode = theme_mode_from_string(self.theme_mode_dd.value)
            self.page.update()

    def _on_high_contrast_change(self, e):
        if self.page:
            self.page.theme = (
                Theme.get_high_contrast_theme()
                if self.high_contrast_switch.value
                else Theme.get_theme()
            )
            self.page.update()

    # pylint: disable=missing-function-docstring, unused-argument
    def save_settings(self, e):
        secret_length = parse_positive_int(self.secret_length_input.value)
        if secret_length is None or not validate_secret_length(secret_length):
            show_snackbar(self.page, LM.get("invalid_secret_length"), error=True)
            return False

        language_before = self.config.get("language")
        language_after = self.language_dd.value

        updated = dict(self.config)
        updated["language"] = language_after
        updated["secret_length"] = secret_length
        updated["theme_mode"] = self.theme_mode_dd.value
        updated["high_contrast"] = bool(self.high_contrast_switch.value)

        try:
            ConfigManager.save_config(updated)
        except (OSError, ValueError) as ex:
            self.logger.error("Failed to save settings: %s", ex)
            show_snackbar(self.page, LM.get("settings_save_failed"), error=True)
            return False

        self.config.update(updated)
        self.logger.info(
            "Settings saved (language=%s, secret_length=%s)",
            language_after,
            secret_length,
        )

        messages = [LM.get("settings_saved")]
        if language_before != language_after:
            messages.append(LM.get("language_restart_required"))
        show_snackbar(self.page, " ".join(messages))
        return True
