from __future__ import annotations

from .qt_text_editor import QtTextEditorAdapter

__all__ = [
    "QtTextEditorAdapter",
]
