"""
Generator View Module.

The configuration form: six inputs, a Generate button beside each
secret-like field, the two template actions and the code panel with
its copy button.
"""

import logging
from typing import Callable, Dict

import flet as ft

from form_data import FIELD_KEYS, SECRET_FIELD_KEYS, FormData
from localization_manager import LocalizationManager as LM
from templates import TemplateKind
from theme import Theme
from ui_utils import UIConstants
from views.base_view import BaseView

logger = logging.getLogger(__name__)


class GeneratorView(BaseView):
    """
    Form view. Holds no form state of its own; every edit is forwarded
    to the controller, which pushes values back through `set_field_value`.
    """

    # pylint: disable=too-many-instance-attributes, too-many-arguments, too-many-positional-arguments
    def __init__(
        self,
        on_field_change: Callable[[str, str], None],
        on_generate_secret: Callable[[str], None],
        on_generate_code: Callable[[TemplateKind], None],
        on_copy: Callable[[], None],
        form_data: FormData,
    ):
        super().__init__(LM.get("generator_title"), ft.Icons.SETTINGS_SUGGEST)
        self.on_field_change = on_field_change
        self.on_generate_secret = on_generate_secret
        self.on_generate_code = on_generate_code
        self.on_copy = on_copy

        self.inputs: Dict[str, ft.TextField] = {}
        self.generate_buttons: Dict[str, ft.OutlinedButton] = {}
        for key in FIELD_KEYS:
            self.inputs[key] = ft.TextField(
                label=LM.get(f"field_{key}"),
                value=form_data.get(key),
                expand=True,
                height=UIConstants.FIELD_HEIGHT,
                data=key,
                on_change=self._on_input_change,
                **Theme.get_input_decoration(),
            )
            if key in SECRET_FIELD_KEYS:
                self.generate_buttons[key] = ft.OutlinedButton(
                    LM.get("generate"),
                    data=key,
                    width=UIConstants.GENERATE_BUTTON_WIDTH,
                    height=UIConstants.FIELD_HEIGHT,
                    tooltip=LM.get("generate_tooltip"),
                    on_click=self._on_generate_click,
                )

        self.db_btn = ft.ElevatedButton(
            LM.get("generate_db_code"),
            expand=True,
            height=UIConstants.FIELD_HEIGHT,
            on_click=lambda e: self.on_generate_code(TemplateKind.DATABASE),
            style=ft.ButtonStyle(
                bgcolor=Theme.PRIMARY,
                color=Theme.TEXT_PRIMARY,
                shape=ft.RoundedRectangleBorder(radius=6),
            ),
        )
        self.n8n_btn = ft.ElevatedButton(
            LM.get("generate_n8n_code"),
            expand=True,
            height=UIConstants.FIELD_HEIGHT,
            on_click=lambda e: self.on_generate_code(TemplateKind.N8N),
            style=ft.ButtonStyle(
                bgcolor=Theme.PRIMARY,
                color=Theme.TEXT_PRIMARY,
                shape=ft.RoundedRectangleBorder(radius=6),
            ),
        )

        self.code_text = ft.Text(
            "",
            selectable=True,
            font_family=Theme.CODE_FONT,
            size=13,
            color=Theme.TEXT_PRIMARY,
        )
        self.copy_btn = ft.TextButton(
            LM.get("copy_code"),
            icon=ft.Icons.COPY,
            on_click=lambda e: self.on_copy(),
        )
        self.code_panel = ft.Container(
            visible=False,
            bgcolor=Theme.BG_CODE,
            border_radius=6,
            padding=16,
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text(LM.get("generated_code"), color=Theme.TEXT_MUTED),
                            self.copy_btn,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    ft.Row([self.code_text], scroll=ft.ScrollMode.AUTO),
                ],
                spacing=10,
            ),
        )

        self._build_ui()

    def _build_ui(self):
        rows = []
        for key in FIELD_KEYS:
            controls = [self.inputs[key]]
            if key in self.generate_buttons:
                controls.append(self.generate_buttons[key])
            rows.append(ft.Row(controls, spacing=0))

        self.add_control(ft.Column(rows, spacing=20))
        self.add_control(ft.Row([self.db_btn, self.n8n_btn], spacing=16))
        self.add_control(self.code_panel)

    def _on_input_change(self, e):
        self.on_field_change(e.control.data, e.control.value or "")

    def _on_generate_click(self, e):
        self.on_generate_secret(e.control.data)

    def set_field_value(self, key: str, value: str):
        self.inputs[key].value = value
        self.refresh()

    def show_code(self, code: str):
        self.code_text.value = code
        self.code_panel.visible = bool(code)
        self.refresh()

    def set_copy_status(self, status: str):
        """Copy button label is the status, or the default action text."""
        self.copy_btn.text = status or LM.get("copy_code")
        self.refresh()
