"""
Configuration management module.

Handles loading, saving, and validating application preferences
with atomic file operations and error recovery.
Form values are never stored here.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from secret_generator import DEFAULT_SECRET_LENGTH, validate_secret_length

logger = logging.getLogger(__name__)

# Configuration file path with fallback
try:
    CONFIG_FILE = Path.home() / ".n8nstack" / "config.json"
except Exception:  # pylint: disable=broad-exception-caught
    CONFIG_FILE = Path("config.json")


class ConfigManager:
    """Manages application preferences with validation and atomic writes."""

    # Defaults and validation schema
    DEFAULTS = {
        "theme_mode": "Dark",
        "language": "pt",
        "high_contrast": False,
        "secret_length": DEFAULT_SECRET_LENGTH,
        "status_clear_seconds": 2.0,
    }

    @staticmethod
    def _resolve_config_file() -> Path:
        """Resolve and return the correct config file path."""
        try:
            config_file = CONFIG_FILE
            if not config_file.parent.exists():
                config_file.parent.mkdir(parents=True, exist_ok=True)
            return config_file
        except OSError:
            # Fallback to local
            return Path("config.json")

    @staticmethod
    def _validate_config(config: dict[str, Any]) -> None:
        """
        Validate configuration data.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a dictionary")

        if "theme_mode" in config:
            val = config["theme_mode"]
            if not isinstance(val, str):
                raise ValueError("theme_mode must be a string")
            if val.lower() not in ["system", "light", "dark"]:
                raise ValueError("theme_mode must be one of: System, Light, Dark")

        if "language" in config and not isinstance(config["language"], str):
            raise ValueError("language must be a string")

        if "high_contrast" in config and not isinstance(config["high_contrast"], bool):
            raise ValueError("high_contrast must be a boolean")

        if "secret_length" in config and not validate_secret_length(
            config["secret_length"]
        ):
            raise ValueError("secret_length must be an even integer from 16 to 128")

        if "status_clear_seconds" in config:
            val = config["status_clear_seconds"]
            if isinstance(val, bool) or not isinstance(val, (int, float)) or val <= 0:
                raise ValueError("status_clear_seconds must be a positive number")

    @staticmethod
    def load_config() -> dict[str, Any]:
        """
        Load configuration from file with error recovery.
        """
        config_path = ConfigManager._resolve_config_file()
        logger.info("Loading config from %s", config_path)

        config = ConfigManager.DEFAULTS.copy()

        if config_path.exists():
            try:
                # Check for empty file first
                if config_path.stat().st_size == 0:
                    logger.warning("Config file is empty, using defaults")
                    return config

                with open(config_path, encoding="utf-8") as f:
                    data = json.load(f)
                    ConfigManager._validate_config(data)
                    config.update(data)
            except (json.JSONDecodeError, ValueError) as e:
                logger.warning("Config corrupted/invalid (%s), using defaults", e)
                # Backup corrupted file
                try:
                    backup = config_path.with_suffix(".json.bak")
                    if os.path.exists(backup):
                        os.unlink(backup)
                    config_path.rename(backup)
                except OSError as exc:
                    logger.warning("Failed to backup corrupted config: %s", exc)
                return config
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error("Failed to load config: %s", e)
                return config

        return config

    @staticmethod
    def save_config(config: dict[str, Any]) -> None:
        """
        Save configuration to file with atomic write operation.
        """
        config_path = ConfigManager._resolve_config_file()
        ConfigManager._validate_config(config)

        temp_path = None

        try:
            if not config_path.parent.exists():
                config_path.parent.mkdir(parents=True, exist_ok=True)

            # Atomic write via temp file
            fd, temp_path = tempfile.mkstemp(
                dir=str(config_path.parent),
                prefix=".config_tmp_",
                suffix=".json",
            )
            os.chmod(temp_path, 0o600)

            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(config, f, indent=2)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, str(config_path))
            try:
                os.chmod(str(config_path), 0o600)
            except OSError:
                logger.warning("Could not set secure permissions on config file")
            logger.info("Configuration saved.")

        except Exception as e:
            logger.error("Failed to save config: %s", e)
            raise

        finally:
            # Cleanup if failed and temp file still exists
            if temp_path and os.path.exists(temp_path):
                try:
                    os.unlink(temp_path)
                except OSError as exc:
                    logger.warning(
                        "Failed to remove temp config file %s: %s", temp_path, exc
                    )
