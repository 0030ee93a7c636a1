"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the app runs in development mode."""
    value = os.environ.get("SKETCHBOOK_ENV") or os.environ.get("SKETCHBOOK_DEV_MODE")
    if not value:
        return False
    normalized = value.strip().lower()
    return normalized in {"dev", "development", "1", "true", "yes"}


def get_data_dir() -> Path:
    """Return the directory holding the catalog, sketches, settings and logs."""
    override = os.environ.get("SKETCHBOOK_DATA_DIR")
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return PROJECT_ROOT / "data"


__all__ = ["is_dev_mode", "get_data_dir", "PROJECT_ROOT"]
