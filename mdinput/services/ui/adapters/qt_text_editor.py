from __future__ import annotations

from typing import Callable

from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QTextEdit

from mdinput.domain.interfaces import IEditorSurface
from mdinput.domain.models import NO_SELECTION
from mdinput.utils.offsets import to_code_points, to_code_units

SelectionListener = Callable[[int, int], None]


class QtTextEditorAdapter(IEditorSurface):
    """
    Narrow adapter over QTextEdit; all offsets it exposes are Python string indices.

    Selection changes are forwarded to `on_selection` as (base, extent). While the
    adapter is replacing the whole buffer, Qt's intermediate cursor moves are
    forwarded as the NO_SELECTION sentinel instead.
    """

    def __init__(self, edit: QTextEdit, on_selection: SelectionListener | None = None):
        self._e = edit
        self._on_selection = on_selection
        self._replacing = False
        self._e.cursorPositionChanged.connect(self._emit_selection)
        self._e.selectionChanged.connect(self._emit_selection)

    def text(self) -> str:
        return self._e.toPlainText()

    def selection(self) -> tuple[int, int]:
        """(base, extent) of the live cursor."""
        c = self._e.textCursor()
        text = self.text()
        return to_code_points(text, c.anchor()), to_code_points(text, c.position())

    def replace_text(self, text: str) -> None:
        """Swap the buffer content as one undo step."""
        c = self._e.textCursor()
        self._replacing = True
        try:
            c.beginEditBlock()
            c.select(QTextCursor.SelectionType.Document)
            c.insertText(text)
            c.endEditBlock()
        finally:
            self._replacing = False

    def set_cursor(self, offset: int) -> None:
        c = self._e.textCursor()
        c.setPosition(to_code_units(self.text(), offset))
        self._e.setTextCursor(c)

    def request_focus(self) -> None:
        self._e.setFocus()

    def release(self) -> None:
        """Stop forwarding selection changes from the wrapped editor."""
        self._e.cursorPositionChanged.disconnect(self._emit_selection)
        self._e.selectionChanged.disconnect(self._emit_selection)
        self._on_selection = None

    def _emit_selection(self) -> None:
        if self._on_selection is None:
            return
        if self._replacing:
            self._on_selection(NO_SELECTION, NO_SELECTION)
            return
        self._on_selection(*self.selection())
