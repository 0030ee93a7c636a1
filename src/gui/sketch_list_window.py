"""Main window listing sketches with search, create, delete and open."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from config.sketch_defaults import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_SKETCH_SOURCE,
    DELETE_DIALOG_TITLE,
    SEARCH_PLACEHOLDER,
    delete_confirmation_text,
)
from gui.controllers.project_list_controller import ProjectListController
from gui.controllers.types import DisplayRow, TaskRunner
from gui.create_sketch_dialog import CreateSketchDialog
from gui.settings_manager import SettingsManager
from gui.sketch_editor_window import SketchEditorWindow
from gui.workers import QtTaskRunner
from services.sketch_service import SketchRecord, SketchStore

logger = logging.getLogger(__name__)

PREVIEW_LINES = 8


class SketchListWindow(QMainWindow):
    """Presentation layer for :class:`ProjectListController`."""

    def __init__(
        self,
        store: SketchStore,
        settings: Optional[SettingsManager] = None,
        runner: Optional[TaskRunner] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(QSize(480, 560))
        self.store = store
        self.settings = settings or SettingsManager()

        # Track open editors {sketch_name: window}
        self._editor_windows: Dict[str, SketchEditorWindow] = {}
        self._activated = False

        self._create_central_widget()
        self._create_actions()

        self.runner = runner or QtTaskRunner(self)
        self.controller = ProjectListController(
            store=store,
            presenter=self,
            runner=self.runner,
            default_source=self.settings.default_sketch_source,
            show_creation_dates=self.settings.show_creation_dates,
        )
        self.settings.settings_changed.connect(self._on_setting_changed)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _create_central_widget(self):
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.search_edit = QLineEdit()
        self.search_edit.setObjectName("searchField")
        self.search_edit.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.setVisible(False)
        self.search_edit.textChanged.connect(self._on_search_text_changed)
        layout.addWidget(self.search_edit)

        self.sketch_list = QListWidget()
        self.sketch_list.setObjectName("sketchList")
        self.sketch_list.setMouseTracking(True)
        self.sketch_list.itemActivated.connect(self._on_item_activated)
        self.sketch_list.itemEntered.connect(self._on_item_entered)
        layout.addWidget(self.sketch_list)

        footer = QHBoxLayout()
        footer.setSpacing(8)

        self.new_button = QPushButton("New Project")
        self.new_button.setObjectName("primaryAction")
        self.new_button.clicked.connect(self._on_create_clicked)
        footer.addWidget(self.new_button)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("dangerAction")
        self.delete_button.clicked.connect(self._on_delete_clicked)
        footer.addWidget(self.delete_button)

        footer.addStretch()

        self.count_label = QLabel("0 Projects")
        self.count_label.setObjectName("countLabel")
        self.count_label.setEnabled(False)
        footer.addWidget(self.count_label)

        about_button = QPushButton("About")
        about_button.clicked.connect(self._on_about)
        footer.addWidget(about_button)

        layout.addLayout(footer)

    def _create_actions(self):
        search_action = QAction("Search", self)
        search_action.setShortcut(QKeySequence.StandardKey.Find)
        search_action.triggered.connect(lambda: self.set_search_active(True))
        self.addAction(search_action)

        close_search_action = QAction("Close Search", self)
        close_search_action.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        close_search_action.triggered.connect(lambda: self.set_search_active(False))
        self.addAction(close_search_action)

        new_action = QAction("New Project", self)
        new_action.setShortcut(QKeySequence.StandardKey.New)
        new_action.triggered.connect(self._on_create_clicked)
        self.addAction(new_action)

        delete_action = QAction("Delete Project", self)
        delete_action.setShortcut(QKeySequence.StandardKey.Delete)
        delete_action.triggered.connect(self._on_delete_clicked)
        self.addAction(delete_action)

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------

    def showEvent(self, event):
        super().showEvent(event)
        if not self._activated:
            self._activated = True
            self.controller.activate()

    def closeEvent(self, event):
        self.controller.teardown()
        if hasattr(self.runner, "shutdown"):
            self.runner.shutdown()
        super().closeEvent(event)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def is_search_active(self) -> bool:
        return self.search_edit.isVisibleTo(self)

    def set_search_active(self, active: bool) -> None:
        self.search_edit.setVisible(active)
        if active:
            self.search_edit.setFocus()
        else:
            self.search_edit.blockSignals(True)
            self.search_edit.clear()
            self.search_edit.blockSignals(False)
        self.controller.set_filter_text(self.search_edit.text(), search_active=active)

    def _on_search_text_changed(self, text: str):
        self.controller.set_filter_text(text, search_active=self.is_search_active())

    # ------------------------------------------------------------------
    # Presenter interface
    # ------------------------------------------------------------------

    def render_rows(self, rows: List[DisplayRow]) -> None:
        self.sketch_list.clear()
        for row in rows:
            text = row.name
            if row.created_at_display:
                text = f"{row.name}\n{row.created_at_display}"
            item = QListWidgetItem(text)
            item.setData(Qt.ItemDataRole.UserRole, row.name)
            self.sketch_list.addItem(item)
        self.delete_button.setEnabled(self.controller.can_delete() and bool(rows))

    def set_count(self, label: str) -> None:
        self.count_label.setText(label)

    def prompt_create(self, initial_name: str, message: str) -> Optional[str]:
        dialog = CreateSketchDialog(initial_name=initial_name, message=message, parent=self)
        if not dialog.exec():
            return None
        return dialog.sketch_name()

    def confirm_delete(self, name: str) -> bool:
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle(DELETE_DIALOG_TITLE)
        box.setText(delete_confirmation_text(name))
        delete_button = box.addButton("Delete", QMessageBox.ButtonRole.DestructiveRole)
        cancel_button = box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
        box.setDefaultButton(cancel_button)
        box.exec()
        return box.clickedButton() is delete_button

    def open_editor(self, project: SketchRecord) -> None:
        existing = self._editor_windows.get(project.name)
        if existing is not None:
            existing.raise_()
            existing.activateWindow()
            return

        editor = SketchEditorWindow(self.store, project, self)
        self._editor_windows[project.name] = editor
        editor.destroyed.connect(lambda: self._editor_windows.pop(project.name, None))
        editor.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        editor.show()
        self.statusBar().showMessage(f"Opened {project.name}", 3000)

    def select_row(self, index: int) -> None:
        item = self.sketch_list.item(index)
        if item is None:
            return
        self.sketch_list.setCurrentRow(index)
        self.sketch_list.scrollToItem(item, QListWidget.ScrollHint.PositionAtCenter)

    # ------------------------------------------------------------------
    # User intents
    # ------------------------------------------------------------------

    def _on_item_activated(self, item: QListWidgetItem):
        self.controller.select_visible(self.sketch_list.row(item))

    def _on_item_entered(self, item: QListWidgetItem):
        if item.toolTip():
            return
        name = self.controller.preview_visible(self.sketch_list.row(item)).name
        self.runner.submit(
            lambda: self.store.read_source(name),
            on_success=lambda source: self._set_preview(name, source),
            on_error=lambda exc: logger.debug("No preview for %s: %s", name, exc),
        )

    def _set_preview(self, name: str, source: str) -> None:
        # Rows may have been re-rendered while the source was loading
        for row in range(self.sketch_list.count()):
            item = self.sketch_list.item(row)
            if item.data(Qt.ItemDataRole.UserRole) == name:
                item.setToolTip("\n".join(source.splitlines()[:PREVIEW_LINES]))
                return

    def _on_create_clicked(self):
        self.controller.start_create()

    def _on_delete_clicked(self):
        row = self.sketch_list.currentRow()
        if row < 0:
            return
        self.controller.request_delete(row)

    def _on_setting_changed(self, key: str, value):
        if key == "show_creation_dates":
            self.controller.show_creation_dates = bool(value)
            self.render_rows(self.controller.display_rows())
        elif key == "default_sketch_source":
            self.controller.default_source = self.settings.default_sketch_source or DEFAULT_SKETCH_SOURCE

    def _on_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} {APP_VERSION}</h3>"
            "<p>Browse, create and edit Processing sketches.</p>",
        )
