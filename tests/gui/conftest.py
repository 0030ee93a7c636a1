"""Shared fixtures for GUI tests."""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication

from gui.settings_manager import SettingsManager


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()


@pytest.fixture
def settings(tmp_path, qt_app):
    """Fresh settings singleton backed by a temp file."""
    SettingsManager.reset_instance()
    manager = SettingsManager(settings_file=tmp_path / "settings.json")
    yield manager
    SettingsManager.reset_instance()
