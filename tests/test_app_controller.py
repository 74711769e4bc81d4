# pylint: disable=missing-module-docstring, missing-class-docstring, missing-function-docstring, protected-access
import json
import unittest
from unittest.mock import MagicMock, patch

from app_controller import AppController
from clipboard_writer import ClipboardWriter, CopyResult
from form_data import FormData
from localization_manager import LocalizationManager as LM
from secret_generator import SecretGenerationError
from templates import TemplateKind

FILLED = {
    "projectName": "acme",
    "domainName": "n8n.acme.com",
    "n8nWebhookDomain": "hooks.acme.com",
    "redisPassword": "r1",
    "postgresPassword": "p1",
    "encryptionKey": "k1",
}


class TestAppController(unittest.TestCase):

    def setUp(self):
        LM.load_language("pt")

        self.state_patcher = patch("app_controller.state")
        self.mock_state = self.state_patcher.start()
        self.mock_state.secret_length = 32
        self.mock_state.status_clear_seconds = 2.0

        self.timer_patcher = patch("status_message.threading.Timer")
        self.mock_timer_cls = self.timer_patcher.start()

        self.page = MagicMock()
        self.ui = MagicMock()
        self.clipboard = MagicMock(spec=ClipboardWriter)
        self.controller = AppController(self.page, self.ui, clipboard=self.clipboard)

    def tearDown(self):
        self.timer_patcher.stop()
        self.state_patcher.stop()

    def _fill(self):
        for key, value in FILLED.items():
            self.controller.on_field_change(key, value)

    def test_starts_with_empty_form(self):
        self.assertEqual(self.controller.form_data, FormData())
        self.assertEqual(self.controller.generated_code, "")

    def test_default_clipboard_chain(self):
        controller = AppController(self.page, self.ui)
        names = [s.name for s in controller.clipboard.strategies]
        self.assertEqual(names, ["page", "pyperclip"])

    def test_field_change_replaces_record(self):
        before = self.controller.form_data
        self.controller.on_field_change("projectName", "acme")
        self.assertEqual(self.controller.form_data.project_name, "acme")
        self.assertEqual(before.project_name, "")

    def test_generate_secret(self):
        secret = self.controller.on_generate_secret("redisPassword")
        self.assertEqual(len(secret), 32)
        self.assertEqual(self.controller.form_data.redis_password, secret)
        self.ui.generator_view.set_field_value.assert_called_once_with(
            "redisPassword", secret
        )

    def test_generate_secret_uses_configured_length(self):
        self.mock_state.secret_length = 64
        self.assertEqual(len(self.controller.on_generate_secret("encryptionKey")), 64)

    def test_generate_secret_rejects_plain_field(self):
        with self.assertRaises(ValueError):
            self.controller.on_generate_secret("projectName")

    @patch("app_controller.show_snackbar")
    @patch("app_controller.generate_secret")
    def test_generate_secret_failure_keeps_value(self, mock_generate, mock_snackbar):
        self.controller.on_field_change("postgresPassword", "old")
        mock_generate.side_effect = SecretGenerationError("no entropy")

        result = self.controller.on_generate_secret("postgresPassword")

        self.assertIsNone(result)
        self.assertEqual(self.controller.form_data.postgres_password, "old")
        self.ui.generator_view.set_field_value.assert_not_called()
        mock_snackbar.assert_called_once()
        self.assertTrue(mock_snackbar.call_args.kwargs["error"])

    def test_generate_database_code(self):
        self._fill()
        code = self.controller.on_generate_code(TemplateKind.DATABASE)

        parsed = json.loads(code)
        self.assertEqual(len(parsed["services"]), 2)
        self.assertEqual(self.controller.generated_code, code)
        self.ui.generator_view.show_code.assert_called_once_with(code)

    def test_generate_n8n_code(self):
        self._fill()
        code = self.controller.on_generate_code(TemplateKind.N8N)
        self.assertIn("n8n_editor", code)

    @patch("app_controller.show_snackbar")
    def test_generate_code_requires_builder_fields(self, mock_snackbar):
        self.controller.on_field_change("projectName", "acme")

        self.assertIsNone(self.controller.on_generate_code(TemplateKind.DATABASE))
        self.assertEqual(self.controller.generated_code, "")
        self.ui.generator_view.show_code.assert_not_called()
        message = mock_snackbar.call_args[0][1]
        self.assertIn("Redis Password", message)
        self.assertIn("PostgreSQL Password", message)
        self.assertNotIn("Project Name", message)
        self.assertNotIn("Domain Name", message)
        self.assertNotIn("Encryption Key", message)

    @patch("app_controller.show_snackbar")
    def test_database_code_ignores_n8n_only_fields(self, mock_snackbar):
        for key in ("projectName", "redisPassword", "postgresPassword"):
            self.controller.on_field_change(key, FILLED[key])

        code = self.controller.on_generate_code(TemplateKind.DATABASE)

        self.assertIsNotNone(code)
        self.assertEqual(len(json.loads(code)["services"]), 2)
        mock_snackbar.assert_not_called()
        self.ui.generator_view.show_code.assert_called_once_with(code)

    @patch("app_controller.show_snackbar")
    def test_n8n_code_requires_every_field(self, mock_snackbar):
        for key in ("projectName", "redisPassword", "postgresPassword"):
            self.controller.on_field_change(key, FILLED[key])

        self.assertIsNone(self.controller.on_generate_code(TemplateKind.N8N))
        message = mock_snackbar.call_args[0][1]
        self.assertIn("Domain Name", message)
        self.assertIn("N8N Webhook Domain", message)
        self.assertIn("Encryption Key", message)
        self.assertNotIn("Redis Password", message)

    def test_copy_success(self):
        self._fill()
        self.controller.on_generate_code(TemplateKind.DATABASE)
        self.clipboard.copy.return_value = CopyResult(True, "page")

        self.assertTrue(self.controller.on_copy())

        self.clipboard.copy.assert_called_once_with(self.controller.generated_code)
        self.assertEqual(self.controller.status.text, "Copiado!")
        self.ui.generator_view.set_copy_status.assert_called_with("Copiado!")
        self.mock_timer_cls.assert_called_once_with(
            2.0, self.controller.status._expire, args=(1,)
        )

    def test_copy_status_reverts(self):
        self.clipboard.copy.return_value = CopyResult(True, "page")
        self.controller.on_copy()

        timer_call = self.mock_timer_cls.call_args
        callback, args = timer_call[0][1], timer_call[1]["args"]
        callback(*args)

        self.assertEqual(self.controller.status.text, "")
        self.ui.generator_view.set_copy_status.assert_called_with("")

    def test_copy_failure(self):
        self.clipboard.copy.return_value = CopyResult(False)

        self.assertFalse(self.controller.on_copy())
        self.assertEqual(self.controller.status.text, "Erro ao copiar")

    def test_cleanup(self):
        self.controller.status.show("x")
        self.controller.cleanup()
        self.mock_timer_cls.return_value.cancel.assert_called()
        self.assertEqual(self.controller.status.text, "x")


class TestCopyFallbackIntegration(unittest.TestCase):

    @patch("app_controller.state")
    @patch("status_message.threading.Timer")
    @patch("clipboard_writer.pyperclip")
    def test_page_failure_falls_back_to_pyperclip(self, mock_pyperclip, _timer, mock_state):
        mock_state.status_clear_seconds = 2.0
        LM.load_language("pt")
        page = MagicMock()
        page.set_clipboard.side_effect = RuntimeError("permission denied")

        controller = AppController(page, MagicMock())
        controller.generated_code = '{"services": []}'

        self.assertTrue(controller.on_copy())
        page.set_clipboard.assert_called_once()
        mock_pyperclip.copy.assert_called_once_with('{"services": []}')
        self.assertEqual(controller.status.text, "Copiado!")
