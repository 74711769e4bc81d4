import logging
import sys
from unittest.mock import MagicMock

logger = logging.getLogger(__name__)


def pytest_configure(config):
    """
    Pytest hook to configure the environment before tests run.
    We attempt to import flet. If it fails (common in CI/headless without shared libs),
    we mock it so that tests can be collected and run.
    """
    try:
        import flet as ft

        # Try to access a property to ensure it's fully loaded
        _ = ft.ThemeMode.DARK
    except (ImportError, OSError, AttributeError) as e:
        logger.warning(
            f"Flet import failed: {e}. Mocking flet and dependencies for tests."
        )
        mock_dependencies()


def mock_dependencies():
    """Mocks flet and other runtime dependencies in sys.modules."""
    flet_mock = MagicMock()

    class MockControl:
        def __init__(self, *args, **kwargs):
            self.content = kwargs.get("content")
            self.controls = kwargs.get("controls", [])
            self.value = kwargs.get("value")
            self.page = None

            # Positional controls list (Row, Column)
            if not self.controls and args and isinstance(args[0], list):
                self.controls = args[0]

            for k, v in kwargs.items():
                setattr(self, k, v)

        def update(self):
            pass

    class MockContainer(MockControl):
        pass

    class MockRow(MockControl):
        pass

    class MockColumn(MockControl):
        pass

    class MockText(MockControl):
        def __init__(self, value=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            if value is not None:
                self.value = value

    class MockButton(MockControl):
        def __init__(self, text=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.text = text

    class MockSnackBar(MockControl):
        def __init__(self, content=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.content = content

    class MockPage(MockControl):
        def open(self, control):
            pass

        def set_clipboard(self, data):
            self.clipboard = data

        def get_clipboard(self):
            return getattr(self, "clipboard", None)

    flet_mock.Control = MockControl
    flet_mock.Container = MockContainer
    flet_mock.Row = MockRow
    flet_mock.Column = MockColumn
    flet_mock.Text = MockText
    flet_mock.TextField = MockControl
    flet_mock.Dropdown = MockControl
    flet_mock.Switch = MockControl
    flet_mock.Icon = MockControl
    flet_mock.Divider = MockControl
    flet_mock.ElevatedButton = MockButton
    flet_mock.OutlinedButton = MockButton
    flet_mock.TextButton = MockButton
    flet_mock.NavigationRail = MockControl
    flet_mock.NavigationRailDestination = MockControl
    flet_mock.SnackBar = MockSnackBar
    flet_mock.Page = MockPage

    flet_mock.ThemeMode = MagicMock()
    flet_mock.ThemeMode.DARK = "dark"
    flet_mock.ThemeMode.LIGHT = "light"
    flet_mock.ThemeMode.SYSTEM = "system"

    sys.modules["flet"] = flet_mock

    # pyperclip
    if "pyperclip" not in sys.modules:
        try:
            import pyperclip  # noqa: F401
        except ImportError:
            pyperclip_mock = MagicMock()

            class MockPyperclipException(Exception):
                pass

            pyperclip_mock.PyperclipException = MockPyperclipException
            sys.modules["pyperclip"] = pyperclip_mock
