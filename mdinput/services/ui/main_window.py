from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QSplitter, QStatusBar, QTextBrowser, QTextEdit

from mdinput.domain.interfaces import IMarkdownRenderer
from mdinput.domain.models import MarkdownAction
from mdinput.services.config.editor_config import EditorConfig
from mdinput.services.ui.markdown_text_input import MarkdownTextInput
from mdinput.services.ui.ports.link_prompt import ILinkPrompt


class MainWindow(QMainWindow):
    """Thin window: markdown input on the left, rendered preview on the right."""

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        config: EditorConfig,
        *,
        initial_text: str = "",
        link_prompt: ILinkPrompt | None = None,
        validator: Callable[[str], str | None] | None = None,
        app_title: str = "Markdown Text Input",
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1000, 600)

        self.renderer = renderer
        self.config = config

        # Widgets
        self.input = MarkdownTextInput(
            initial_text,
            actions=config.actions,
            hint=config.hint,
            right_to_left=config.right_to_left,
            max_lines=config.max_lines,
            insert_links_by_dialog=config.insert_links_by_dialog,
            link_prompt=link_prompt,
            validator=validator,
            parent=self,
        )
        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.input)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)
        self.setStatusBar(QStatusBar(self))

        # Signals
        self.input.text_changed.connect(self._render_preview)
        self.input.format_failed.connect(self._show_error)
        self.input.validation_changed.connect(self._show_validation)

        self._build_menu()
        self._render_preview(self.input.text())
        self._show_validation(self.input.error_message() or "")

    # ---------- UI creation ----------
    def _build_menu(self) -> None:
        self.act_toggle_wrap = QAction(
            "Toggle Wrap",
            self,
            checkable=True,
            checked=True,
            triggered=self._toggle_wrap,
        )
        self.act_toggle_preview = QAction(
            "Toggle Preview",
            self,
            checkable=True,
            checked=True,
            triggered=self._toggle_preview,
        )
        viewm = self.menuBar().addMenu("&View")
        viewm.addAction(self.act_toggle_wrap)
        viewm.addAction(self.act_toggle_preview)

        formatm = self.menuBar().addMenu("F&ormat")
        for action, act in self.input.action_map.items():
            # Title lives in a toolbar widget; its levels are listed below.
            if action is not MarkdownAction.TITLE:
                formatm.addAction(act)
        for act in self.input.title_actions.values():
            formatm.addAction(act)

    # ---------- Actions ----------
    def _toggle_wrap(self, on: bool) -> None:
        mode = QTextEdit.LineWrapMode.WidgetWidth if on else QTextEdit.LineWrapMode.NoWrap
        self.input.editor.setLineWrapMode(mode)

    def _toggle_preview(self, on: bool) -> None:
        self.preview.setVisible(on)

    # ---------- Helpers ----------
    def _render_preview(self, text: str) -> None:
        self.preview.setHtml(self.renderer.to_html(text))

    def _show_error(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def _show_validation(self, message: str) -> None:
        if message:
            self.statusBar().showMessage(message)
        else:
            self.statusBar().clearMessage()

    # ---------- Close ----------
    def closeEvent(self, event):
        self.input.detach()
        super().closeEvent(event)
