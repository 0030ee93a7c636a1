"""Dialog asking for the name of a new sketch."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from config.sketch_defaults import CREATE_DIALOG_TITLE


class CreateSketchDialog(QDialog):
    """Single-field prompt.

    The first prompt is titled "New Processing Project"; after a rejected
    name the rejection message becomes the heading and the field holds
    the suggested name.
    """

    def __init__(self, initial_name: str = "", message: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        heading = message or CREATE_DIALOG_TITLE
        self.setWindowTitle(CREATE_DIALOG_TITLE)
        self.setMinimumWidth(380)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self.heading_label = QLabel(heading)
        self.heading_label.setWordWrap(True)
        layout.addWidget(self.heading_label)

        self.name_edit = QLineEdit()
        self.name_edit.setText(initial_name)
        self.name_edit.selectAll()
        layout.addWidget(self.name_edit)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Create")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def sketch_name(self) -> str:
        # Validation happens in the controller, so the text is passed on untrimmed
        return self.name_edit.text()
