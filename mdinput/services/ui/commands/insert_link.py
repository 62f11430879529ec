from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mdinput.domain.interfaces import IEditorSurface, IFormatEngine
from mdinput.domain.models import FormatParams, FormatResult, MarkdownAction
from mdinput.services.format_engine import FormatEngine
from mdinput.services.selection_session import SelectionSession
from mdinput.services.ui.commands.apply_markdown import apply_to_surface
from mdinput.services.ui.ports.link_prompt import ILinkPrompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertLink:
    """
    Command: replace the selection with a markdown link.

    With a prompt, the user confirms label and URL first (label pre-filled from
    the selection); cancelling leaves everything untouched. Without a prompt the
    selected text is used as both label and URL.
    """

    surface: IEditorSurface
    session: SelectionSession
    prompt: ILinkPrompt | None = None
    engine: IFormatEngine = field(default_factory=FormatEngine)

    def execute(self) -> FormatResult | None:
        selected = self.session.selected_text(self.surface.text())

        if self.prompt is None:
            params = FormatParams(link_url=selected, selected_text=selected)
        else:
            request = self.prompt.ask_link(selected)
            if request is None:
                logger.debug("Link insertion cancelled")
                return None
            params = FormatParams(link_url=request.url, selected_text=request.label)

        return apply_to_surface(
            self.surface, self.session, self.engine, MarkdownAction.LINK, params
        )
