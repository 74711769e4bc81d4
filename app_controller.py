"""
AppController module.
Owns the form record, the generated code and the copy status, and
bridges UI events to the generator, builders and clipboard.
"""

import logging
from typing import Optional

import flet as ft

from app_state import state
from clipboard_writer import ClipboardWriter
from form_data import SECRET_FIELD_KEYS, FormData, MissingFieldsError
from localization_manager import LocalizationManager as LM
from secret_generator import SecretGenerationError, generate_secret
from status_message import StatusMessage
from templates import TemplateKind, generate_code, required_fields
from ui_manager import UIManager
from ui_utils import show_snackbar

logger = logging.getLogger(__name__)


class AppController:
    """
    Controller for the generator form.

    The form record is an immutable FormData value replaced on every edit
    and passed explicitly to the template builders.
    """

    def __init__(
        self,
        page: ft.Page,
        ui_manager: UIManager,
        clipboard: Optional[ClipboardWriter] = None,
        form_data: Optional[FormData] = None,
    ):
        self.page = page
        self.ui = ui_manager
        self.form_data = form_data or FormData()
        self.generated_code = ""
        self.clipboard = clipboard or ClipboardWriter.for_page(page)
        self.status = StatusMessage(
            self._on_status_change, clear_after=state.status_clear_seconds
        )

    def cleanup(self):
        """Clean up resources on shutdown."""
        logger.info("Controller cleaning up...")
        self.status.cancel()

    # --- Callbacks ---

    def on_field_change(self, key: str, value: str):
        self.form_data = self.form_data.with_value(key, value)

    def on_generate_secret(self, key: str) -> Optional[str]:
        """Fill a secret-like field with a fresh random value."""
        if key not in SECRET_FIELD_KEYS:
            raise ValueError(f"{key} is not a secret field")

        try:
            secret = generate_secret(state.secret_length)
        except SecretGenerationError as e:
            logger.error("Secret generation failed for %s: %s", key, e)
            show_snackbar(self.page, LM.get("secret_generation_failed"), error=True)
            return None

        self.form_data = self.form_data.with_value(key, secret)
        if self.ui.generator_view:
            self.ui.generator_view.set_field_value(key, secret)
        logger.info("Generated new value for %s", key)
        return secret

    def on_generate_code(self, kind: TemplateKind) -> Optional[str]:
        """Render the requested template from the current form record."""
        try:
            self.form_data.validate_required(required_fields(kind))
        except MissingFieldsError as e:
            logger.info("Cannot generate %s template: %s", kind.value, e)
            labels = ", ".join(LM.get(f"field_{key}") for key in e.missing)
            show_snackbar(self.page, LM.get("missing_fields", labels), error=True)
            return None

        self.generated_code = generate_code(kind, self.form_data)
        if self.ui.generator_view:
            self.ui.generator_view.show_code(self.generated_code)
        return self.generated_code

    def on_copy(self) -> bool:
        """Copy the displayed code. Outcome is reported through the status."""
        result = self.clipboard.copy(self.generated_code)
        if result.success:
            self.status.show(LM.get("copy_success"))
        else:
            self.status.show(LM.get("copy_failed"))
        return result.success

    def _on_status_change(self, text: str):
        if self.ui.generator_view:
            self.ui.generator_view.set_copy_status(text)
