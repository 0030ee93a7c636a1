"""Minimal source editor for a single sketch."""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMessageBox, QPlainTextEdit, QWidget

from services.errors import PersistenceUnavailable
from services.sketch_service import SketchRecord, SketchStore
from utils.error_handling import format_error_message, log_exception

logger = logging.getLogger(__name__)


class SketchEditorWindow(QMainWindow):
    """Shows the sketch's ``.pde`` source and saves it back on Ctrl+S."""

    def __init__(self, store: SketchStore, project: SketchRecord, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.store = store
        self.project = project
        self.setWindowTitle(project.name)
        self.resize(900, 640)

        self.editor = QPlainTextEdit()
        self.editor.setObjectName("codeEditor")
        self.setCentralWidget(self.editor)

        save_action = QAction("Save", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self.save)
        self.addAction(save_action)

        self._load()

    def _load(self) -> None:
        try:
            source = self.store.read_source(self.project.name)
        except PersistenceUnavailable as exc:
            log_exception(exc, "Opening sketch failed", {"sketch": self.project.name})
            self.statusBar().showMessage(format_error_message(exc, include_type=False))
            source = ""
        self.editor.setPlainText(source)
        self.editor.document().setModified(False)

    def save(self) -> bool:
        try:
            self.store.save_source(self.project.name, self.editor.toPlainText())
        except PersistenceUnavailable as exc:
            log_exception(exc, "Saving sketch failed", {"sketch": self.project.name})
            QMessageBox.critical(self, "Save Failed", format_error_message(exc, include_type=False))
            return False
        self.editor.document().setModified(False)
        self.statusBar().showMessage(f"Saved {self.project.name}", 3000)
        return True

    def is_modified(self) -> bool:
        return self.editor.document().isModified()

    def closeEvent(self, event):
        if not self.is_modified():
            event.accept()
            return

        reply = QMessageBox.question(
            self,
            "Unsaved Changes",
            f"Save changes to \"{self.project.name}\" before closing?",
            QMessageBox.StandardButton.Save
            | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Save,
        )
        if reply == QMessageBox.StandardButton.Cancel:
            event.ignore()
            return
        if reply == QMessageBox.StandardButton.Save and not self.save():
            event.ignore()
            return
        event.accept()
