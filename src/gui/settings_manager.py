"""Global settings manager for the Sketchbook application."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from utils.env import get_data_dir

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_SETTINGS = {
    "show_creation_dates": True,
    "default_sketch_source": None,  # None uses the built-in template
}


def get_settings_file() -> Path:
    return get_data_dir() / "settings.json"


class SettingsManager(QObject):
    """Singleton manager for global application settings."""

    # Signal emitted when any setting changes
    settings_changed = pyqtSignal(str, object)  # (setting_name, new_value)

    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Optional[Path] = None):
        if self._initialized:
            return
        super().__init__()
        self._initialized = True
        self._settings_file = settings_file or get_settings_file()
        self._settings = DEFAULT_SETTINGS.copy()
        self._load_settings()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton so the next construction reloads from disk."""
        cls._instance = None

    def _load_settings(self):
        """Load settings from file."""
        try:
            if self._settings_file.exists():
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                    # Merge with defaults (in case new settings were added)
                    for key, value in saved.items():
                        if key in DEFAULT_SETTINGS:
                            self._settings[key] = value
                logger.debug("Settings loaded from %s", self._settings_file)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load settings: %s", e)

    def _save_settings(self):
        """Save settings to file."""
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._settings_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
            logger.debug("Settings saved to %s", self._settings_file)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value and emit change signal."""
        if key in self._settings and self._settings[key] != value:
            self._settings[key] = value
            self._save_settings()
            self.settings_changed.emit(key, value)

    @property
    def show_creation_dates(self) -> bool:
        """Whether rows show their creation date when not filtering."""
        return bool(self._settings.get("show_creation_dates", True))

    @show_creation_dates.setter
    def show_creation_dates(self, value: bool):
        self.set("show_creation_dates", bool(value))

    @property
    def default_sketch_source(self) -> Optional[str]:
        """Source written into new sketches; None means the built-in template."""
        return self._settings.get("default_sketch_source") or None

    @default_sketch_source.setter
    def default_sketch_source(self, value: Optional[str]):
        self.set("default_sketch_source", value or None)
