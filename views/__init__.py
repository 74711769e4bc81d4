"""Views package for the generator application."""

from views.base_view import BaseView
from views.generator_view import GeneratorView
from views.settings_view import SettingsView

__all__ = [
    "GeneratorView",
    "SettingsView",
    "BaseView",
]
