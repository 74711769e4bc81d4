import logging
import threading
from typing import Any, Dict

from config_manager import ConfigManager

logger = logging.getLogger(__name__)


class AppState:
    """Process-wide preferences. The form record lives in the controller."""

    _instance = None
    _instance_lock = threading.RLock()
    _init_lock = threading.Lock()

    def __new__(cls):
        """
        Thread-safe singleton constructor.

        Double-checked locking pattern to minimize lock contention.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    instance = super(AppState, cls).__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self):
        with self._init_lock:
            if self._initialized:
                return

            logger.info("Initializing AppState singleton...")
            self.config: Dict[str, Any] = ConfigManager.load_config()
            self._initialized = True
            logger.info("AppState initialization complete")

    @property
    def high_contrast(self) -> bool:
        return bool(self.config.get("high_contrast", False))

    @property
    def secret_length(self) -> int:
        return self.config.get("secret_length", ConfigManager.DEFAULTS["secret_length"])

    @property
    def status_clear_seconds(self) -> float:
        return float(
            self.config.get(
                "status_clear_seconds", ConfigManager.DEFAULTS["status_clear_seconds"]
            )
        )


state = AppState()
