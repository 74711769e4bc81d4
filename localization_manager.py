"""
Localization Manager for the form and status strings.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FALLBACK_LANG = "en"


class LocalizationManager:
    """
    Loads `locales/<lang>.json` and resolves keys, falling back to English
    and finally to the key itself.
    """

    _strings: dict[str, str] = {}
    _fallback_strings: dict[str, str] = {}
    _current_lang: str = FALLBACK_LANG
    _locale_dir: Path = Path(__file__).resolve().parent / "locales"

    @classmethod
    def _load_file(cls, file_path: Path) -> dict[str, str]:
        """Load a locale JSON file into a dict of strings."""
        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("Locale file must contain a JSON object")
            return {str(k): str(v) for k, v in data.items()}
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Failed to load locale file %s: %s", file_path, e)
            return {}

    @classmethod
    def load_language(cls, lang_code: str):
        """Load a language file."""
        if not isinstance(lang_code, str):
            logger.warning("Invalid language code type, falling back to English")
            lang_code = FALLBACK_LANG

        # Security: Prevent path traversal
        if ".." in lang_code or "/" in lang_code or "\\" in lang_code:
            logger.warning("Invalid language code detected: %s", lang_code)
            lang_code = FALLBACK_LANG

        lang_code = lang_code.strip().lower() or FALLBACK_LANG
        cls._current_lang = lang_code
        cls._strings = {}
        cls._fallback_strings = {}

        file_path = cls._locale_dir / f"{lang_code}.json"
        if not file_path.exists():
            logger.warning("Locale file not found: %s", file_path)
            if lang_code == FALLBACK_LANG:
                return
            logger.info("Falling back to English")
            cls._current_lang = FALLBACK_LANG
            file_path = cls._locale_dir / f"{FALLBACK_LANG}.json"

        cls._strings = cls._load_file(file_path)
        logger.debug("Loaded locale: %s", cls._current_lang)

        if cls._current_lang != FALLBACK_LANG:
            fallback_path = cls._locale_dir / f"{FALLBACK_LANG}.json"
            if fallback_path.exists():
                cls._fallback_strings = cls._load_file(fallback_path)

    @classmethod
    def get(cls, key: str, *args) -> str:
        """
        Get a localized string, formatted with `args` when given.
        """
        val = cls._strings.get(key)
        if val is None and cls._fallback_strings:
            val = cls._fallback_strings.get(key)
        if val is None:
            logger.debug(
                "Missing localization key: %s (lang=%s)", key, cls._current_lang
            )
            val = key

        if args:
            try:
                return val.format(*args)
            except (IndexError, KeyError, ValueError):
                return val
        return val

    @classmethod
    def get_available_languages(cls) -> list[str]:
        """Get list of available language codes."""
        path = cls._locale_dir
        if not path.exists():
            return [FALLBACK_LANG]

        langs = [f.stem for f in path.glob("*.json") if f.is_file()]
        return sorted(langs) if langs else [FALLBACK_LANG]
