"""
Sketchbook - Main Entry Point

A desktop browser for Processing sketches: list, search, create, delete and edit.
"""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from config.sketch_defaults import APP_NAME
from database.catalog_base import dispose_catalog_engines
from gui.settings_manager import SettingsManager
from gui.sketch_list_window import SketchListWindow
from gui.styles import get_stylesheet
from services.sketch_service import SketchStore
from utils.env import is_dev_mode
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    log_file = setup_logging(logging.DEBUG if is_dev_mode() else logging.INFO)
    logger.info("Starting %s", APP_NAME, extra={"event": "app.start", "log_file": str(log_file)})

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName("Sketchbook")
    app.setFont(QFont("Segoe UI", 10))
    app.setStyleSheet(get_stylesheet())

    window = SketchListWindow(SketchStore(), SettingsManager())
    window.show()

    exit_code = app.exec()
    dispose_catalog_engines()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
