from __future__ import annotations

from dataclasses import dataclass, field

from mdinput.domain.interfaces import IEditorSurface, IFormatEngine
from mdinput.domain.models import FormatParams, FormatResult, MarkdownAction
from mdinput.services.format_engine import FormatEngine
from mdinput.services.selection_session import SelectionSession


def apply_to_surface(
    surface: IEditorSurface,
    session: SelectionSession,
    engine: IFormatEngine,
    action: MarkdownAction,
    params: FormatParams,
) -> FormatResult:
    """One resolve -> apply -> after_apply round trip against a live editor."""
    text = surface.text()
    start, end, _ = session.resolve_for_action(text)
    result = engine.apply(action, text, start, end, params)

    surface.replace_text(result.text)
    placement = session.after_apply(result, was_selection_empty=start == end)
    surface.set_cursor(placement.offset)
    if placement.refocus:
        surface.request_focus()
    return result


@dataclass(frozen=True)
class ApplyMarkdown:
    """
    Command: apply a toolbar action to the session's selection.
    Wrapping actions toggle; Title/List work on whole lines.
    """

    surface: IEditorSurface
    session: SelectionSession
    action: MarkdownAction
    title_level: int = 1
    engine: IFormatEngine = field(default_factory=FormatEngine)

    def execute(self) -> FormatResult:
        params = FormatParams(title_level=self.title_level)
        return apply_to_surface(self.surface, self.session, self.engine, self.action, params)
