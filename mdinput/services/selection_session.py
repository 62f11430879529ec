from __future__ import annotations

import logging

from mdinput.domain.models import (
    NO_SELECTION,
    CursorPlacement,
    FormatResult,
    SelectionRange,
)

logger = logging.getLogger(__name__)


class SelectionSession:
    """
    Remembers the last real selection reported by one editor instance.

    Hosts sometimes report "no selection" (base offset -1) transiently, e.g. while
    focus moves to a toolbar button. Those reports are ignored so the next action
    still acts on what the user had selected. One session per editor; call
    reset() when the editor is detached.
    """

    def __init__(self) -> None:
        self._selection = SelectionRange(0, 0)

    @property
    def selection(self) -> SelectionRange:
        """Last tracked selection, in host order (base, extent)."""
        return self._selection

    def on_selection_changed(self, base_offset: int, extent_offset: int) -> None:
        if base_offset == NO_SELECTION:
            logger.debug("Ignoring sentinel selection (extent=%d)", extent_offset)
            return
        self._selection = SelectionRange(base_offset, extent_offset)

    def reset(self) -> None:
        self._selection = SelectionRange(0, 0)

    def is_selection_empty(self) -> bool:
        return self._selection.is_collapsed

    def resolve_for_action(self, text: str) -> tuple[int, int, str]:
        """
        Return (start, end, selected_text) for the live buffer.

        The stored range is normalized to start <= end and clamped to the buffer
        length, since the buffer may have shrunk since the selection was seen.
        """
        rng = self._selection.normalized()
        clamped = rng.clamped(len(text))
        if clamped != rng:
            logger.debug(
                "Clamped selection (%d, %d) to (%d, %d) for length %d",
                rng.start,
                rng.end,
                clamped.start,
                clamped.end,
                len(text),
            )
        return clamped.start, clamped.end, text[clamped.start : clamped.end]

    def selected_text(self, text: str) -> str:
        return self.resolve_for_action(text)[2]

    def after_apply(self, result: FormatResult, was_selection_empty: bool) -> CursorPlacement:
        """
        Final caret position for the host after `result` has been applied.

        Empty-selection insertions step back into the inserted markers and ask
        the host to take focus again so the user can keep typing.
        """
        if was_selection_empty and result.collapse_back_by > 0:
            offset = result.cursor_offset - result.collapse_back_by
        else:
            offset = result.cursor_offset
        self._selection = SelectionRange.collapsed(offset)
        return CursorPlacement(offset=offset, refocus=was_selection_empty)
