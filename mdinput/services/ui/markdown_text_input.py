from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QFont
from PyQt6.QtWidgets import QMenu, QTextEdit, QToolBar, QToolButton, QVBoxLayout, QWidget

from mdinput.domain.errors import FormatError
from mdinput.domain.interfaces import IFormatEngine
from mdinput.domain.models import MAX_TITLE_LEVEL, MIN_TITLE_LEVEL, FormatResult, MarkdownAction
from mdinput.services.format_engine import FormatEngine
from mdinput.services.selection_session import SelectionSession
from mdinput.services.ui.adapters.qt_text_editor import QtTextEditorAdapter
from mdinput.services.ui.commands import ApplyMarkdown, InsertLink
from mdinput.services.ui.link_dialog import QtLinkPrompt
from mdinput.services.ui.ports.link_prompt import ILinkPrompt
from mdinput.utils.constants import DEFAULT_ACTIONS, DEFAULT_MAX_LINES

logger = logging.getLogger(__name__)

_LABELS = {
    MarkdownAction.BOLD: ("B", "Bold"),
    MarkdownAction.ITALIC: ("I", "Italic"),
    MarkdownAction.STRIKETHROUGH: ("S", "Strikethrough"),
    MarkdownAction.TITLE: ("H#", "Heading"),
    MarkdownAction.LINK: ("Link", "Insert link"),
    MarkdownAction.LIST: ("List", "Bulleted list"),
}


class MarkdownTextInput(QWidget):
    """
    Plain-text editor with a markdown formatting toolbar.

    The toolbar shows `actions` in the given order. Every content change is
    emitted through `text_changed`; engine errors are logged and reported via
    `format_failed` without touching the buffer.

    A host may pass its own `editor`. The widget then formats that editor's
    buffer, leaves its content alone on construction, and hands it back on
    `detach()` instead of owning it. `validator` maps the content to an error
    message (or None) after every change; the current message is available from
    `error_message()` and every change of it is emitted as `validation_changed`
    (an empty string once the content is valid again).
    """

    text_changed = pyqtSignal(str)
    format_failed = pyqtSignal(str)
    validation_changed = pyqtSignal(str)

    def __init__(
        self,
        initial_value: str = "",
        *,
        actions: Iterable[MarkdownAction] | None = None,
        hint: str = "",
        right_to_left: bool = False,
        max_lines: int | None = DEFAULT_MAX_LINES,
        insert_links_by_dialog: bool = True,
        on_text_changed: Callable[[str], None] | None = None,
        validator: Callable[[str], str | None] | None = None,
        editor: QTextEdit | None = None,
        font: QFont | None = None,
        link_prompt: ILinkPrompt | None = None,
        engine: IFormatEngine | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)

        self.session = SelectionSession()
        self._engine = engine or FormatEngine()
        self._actions = tuple(
            actions if actions is not None else (MarkdownAction(a) for a in DEFAULT_ACTIONS)
        )
        self._insert_links_by_dialog = insert_links_by_dialog
        self._link_prompt = link_prompt or QtLinkPrompt(self)
        self._validator = validator
        self._error: str | None = None
        self._owns_editor = editor is None
        self._released = False

        # Widgets
        self.editor = editor if editor is not None else QTextEdit(self)
        self.editor.setAcceptRichText(False)
        if hint:
            self.editor.setPlaceholderText(hint)
        if font is not None:
            self.editor.setFont(font)
        if right_to_left:
            self._set_right_to_left()
        if max_lines:
            self._limit_height(max_lines)

        self.surface = QtTextEditorAdapter(self.editor, self.session.on_selection_changed)

        self.toolbar = QToolBar("Formatting", self)
        self.toolbar.setMovable(False)
        self.action_map: dict[MarkdownAction, QAction] = {}
        self.title_actions: dict[int, QAction] = {}
        self._build_toolbar()

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.editor)
        root.addWidget(self.toolbar)

        # Initial content is not reported as a change.
        if self._owns_editor:
            self.editor.setPlainText(initial_value)
        self._validate(self.editor.toPlainText())

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        if on_text_changed is not None:
            self.text_changed.connect(on_text_changed)

    # ---------- UI creation ----------
    def _build_toolbar(self) -> None:
        for action in self._actions:
            text, tip = _LABELS[action]
            if action is MarkdownAction.TITLE:
                self.action_map[action] = self._build_title_button(text, tip)
                continue
            act = QAction(text, self)
            act.setObjectName(action.key)
            act.setToolTip(tip)
            act.triggered.connect(lambda _chk=False, a=action: self.apply(a))
            self.toolbar.addAction(act)
            self.action_map[action] = act

    def _build_title_button(self, text: str, tip: str) -> QAction:
        menu = QMenu(self)
        for level in range(MIN_TITLE_LEVEL, MAX_TITLE_LEVEL + 1):
            act = QAction(f"H{level}", self)
            act.setObjectName(f"H{level}_button")
            act.triggered.connect(
                lambda _chk=False, lvl=level: self.apply(MarkdownAction.TITLE, title_level=lvl)
            )
            menu.addAction(act)
            self.title_actions[level] = act

        btn = QToolButton(self)
        btn.setObjectName(MarkdownAction.TITLE.key)
        btn.setText(text)
        btn.setToolTip(tip)
        btn.setMenu(menu)
        btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        return self.toolbar.addWidget(btn)

    def _set_right_to_left(self) -> None:
        self.editor.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        opt = self.editor.document().defaultTextOption()
        opt.setTextDirection(Qt.LayoutDirection.RightToLeft)
        self.editor.document().setDefaultTextOption(opt)

    def _limit_height(self, max_lines: int) -> None:
        fm = self.editor.fontMetrics()
        margins = 2 * (self.editor.frameWidth() + int(self.editor.document().documentMargin()))
        self.editor.setMaximumHeight(fm.lineSpacing() * max_lines + margins)

    # ---------- Public API ----------
    @property
    def actions_shown(self) -> tuple[MarkdownAction, ...]:
        return self._actions

    def text(self) -> str:
        return self.surface.text()

    def set_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def apply(self, action: MarkdownAction, *, title_level: int = 1) -> FormatResult | None:
        """Run one toolbar action against the tracked selection."""
        if action is MarkdownAction.LINK:
            return self.insert_link()
        return self._run(
            ApplyMarkdown(self.surface, self.session, action, title_level, self._engine)
        )

    def insert_link(self) -> FormatResult | None:
        prompt = self._link_prompt if self._insert_links_by_dialog else None
        return self._run(InsertLink(self.surface, self.session, prompt, self._engine))

    def error_message(self) -> str | None:
        """Message from the validator for the current content, or None."""
        return self._error

    def detach(self) -> None:
        """
        Forget the tracked selection; call when the editor leaves its host.

        A host-supplied editor is disconnected and unparented so it outlives
        this widget. An editor created here stays with the widget.
        """
        self.session.reset()
        if self._owns_editor or self._released:
            return
        self._released = True
        self.editor.textChanged.disconnect(self._on_text_changed)
        self.surface.release()
        self.editor.setParent(None)

    # ---------- Helpers ----------
    def _run(self, command: ApplyMarkdown | InsertLink) -> FormatResult | None:
        try:
            return command.execute()
        except FormatError as e:
            logger.warning("Formatting failed: %s", e)
            self.format_failed.emit(str(e))
            return None

    def _on_text_changed(self) -> None:
        text = self.editor.toPlainText()
        self._validate(text)
        self.text_changed.emit(text)

    def _validate(self, text: str) -> None:
        if self._validator is None:
            return
        error = self._validator(text)
        if error == self._error:
            return
        self._error = error
        self.validation_changed.emit(error or "")
