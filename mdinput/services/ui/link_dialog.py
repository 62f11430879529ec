from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mdinput.domain.models import LinkRequest
from mdinput.services.ui.ports.link_prompt import ILinkPrompt


class LinkDialog(QDialog):
    """Modal "Insert Link" dialog with label and URL fields."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Insert Link")
        self.setModal(True)

        # Widgets
        self.text_edit = QLineEdit()
        self.text_edit.setPlaceholderText("example")
        self.url_edit = QLineEdit()
        self.url_edit.setPlaceholderText("https://example.com")

        self.insert_btn = QPushButton("Insert")
        self.insert_btn.setDefault(True)
        self.cancel_btn = QPushButton("Cancel")

        # Layout
        form = QGridLayout()
        form.addWidget(QLabel("Text:"), 0, 0)
        form.addWidget(self.text_edit, 0, 1, 1, 3)
        form.addWidget(QLabel("Link:"), 1, 0)
        form.addWidget(self.url_edit, 1, 1, 1, 3)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.cancel_btn)
        buttons.addWidget(self.insert_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(buttons)

        # Signals
        self.text_edit.returnPressed.connect(self.url_edit.setFocus)
        self.insert_btn.clicked.connect(self.accept)
        self.cancel_btn.clicked.connect(self.reject)

    def prepare(self, initial_label: str) -> None:
        """Reset the fields; focus the label when it is empty, else the URL."""
        self.text_edit.setText(initial_label)
        self.url_edit.clear()
        if initial_label:
            self.url_edit.setFocus()
        else:
            self.text_edit.setFocus()

    def request(self) -> LinkRequest:
        return LinkRequest(label=self.text_edit.text(), url=self.url_edit.text())


class QtLinkPrompt(ILinkPrompt):
    """Qt-backed implementation of the link prompt; blocks until the dialog closes."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def ask_link(self, initial_label: str) -> LinkRequest | None:
        dlg = LinkDialog(self._parent)
        dlg.prepare(initial_label)
        try:
            if dlg.exec() != QDialog.DialogCode.Accepted:
                return None
            return dlg.request()
        finally:
            dlg.deleteLater()
