"""Selection-aware markdown formatting for plain-text editors."""

from mdinput.domain.models import FormatParams, FormatResult, MarkdownAction
from mdinput.services.format_engine import FormatEngine, apply_markdown
from mdinput.services.selection_session import SelectionSession

__all__ = [
    "FormatEngine",
    "FormatParams",
    "FormatResult",
    "MarkdownAction",
    "SelectionSession",
    "apply_markdown",
]
