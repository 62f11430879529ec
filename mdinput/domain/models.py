from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Host sentinel meaning "no selection reported right now".
NO_SELECTION = -1

MIN_TITLE_LEVEL = 1
MAX_TITLE_LEVEL = 6


class MarkdownAction(Enum):
    """Closed set of toolbar actions understood by the format engine."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    TITLE = "title"
    LINK = "link"
    LIST = "list"

    @property
    def marker(self) -> str | None:
        """Wrapping marker, or None for line-scoped and structural actions."""
        return _MARKERS.get(self)

    @property
    def key(self) -> str:
        """Stable object name for the toolbar button."""
        return f"{self.value}_button"

    @classmethod
    def from_name(cls, name: str) -> MarkdownAction:
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise KeyError(name) from None


_MARKERS = {
    MarkdownAction.BOLD: "**",
    MarkdownAction.ITALIC: "*",
    MarkdownAction.STRIKETHROUGH: "~~",
}

LIST_PREFIX = "- "


def title_prefix(level: int) -> str:
    return "#" * level + " "


@dataclass(frozen=True)
class SelectionRange:
    start: int
    end: int

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    def normalized(self) -> SelectionRange:
        if self.start <= self.end:
            return self
        return SelectionRange(self.end, self.start)

    def clamped(self, length: int) -> SelectionRange:
        return SelectionRange(
            max(0, min(self.start, length)),
            max(0, min(self.end, length)),
        )

    @staticmethod
    def collapsed(offset: int) -> SelectionRange:
        return SelectionRange(offset, offset)


@dataclass(frozen=True)
class FormatParams:
    """
    Action-specific extras for a single engine call.

    title_level:   heading level 1..6, used by TITLE only
    link_url:      target for LINK; None or "" yields an empty target
    selected_text: label override for LINK (e.g. collected by a dialog)
    """

    title_level: int = 1
    link_url: str | None = None
    selected_text: str | None = None


@dataclass(frozen=True)
class FormatResult:
    text: str
    cursor_offset: int
    collapse_back_by: int = 0


@dataclass(frozen=True)
class LinkRequest:
    """Label and URL confirmed by the user in the link dialog."""

    label: str
    url: str


@dataclass(frozen=True)
class CursorPlacement:
    """Where the host should put its caret after an edit, and whether to refocus."""

    offset: int
    refocus: bool = False
