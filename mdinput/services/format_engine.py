from __future__ import annotations

import logging
import re
from typing import Callable

from mdinput.domain.errors import (
    InvalidSelectionError,
    InvalidTitleLevelError,
    UnsupportedActionError,
)
from mdinput.domain.interfaces import IFormatEngine
from mdinput.domain.models import (
    LIST_PREFIX,
    MAX_TITLE_LEVEL,
    MIN_TITLE_LEVEL,
    FormatParams,
    FormatResult,
    MarkdownAction,
    title_prefix,
)

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^(#+) ")

# A line transform returns (prefix, body); the new line is prefix + body.
LineTransform = Callable[[str], "tuple[str, str]"]


# ----------------------------- pure look-ups -----------------------------


def is_wrapped(text: str, start: int, end: int, marker: str) -> bool:
    """True when `marker` sits immediately before `start` and immediately after `end`."""
    n = len(marker)
    if n == 0 or start < n or end + n > len(text):
        return False
    return text[start - n : start] == marker and text[end : end + n] == marker


def line_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """
    Return (line_start, line_end) of the whole lines touched by [start, end].

    line_end excludes the trailing newline. A non-empty range ending right after
    a newline covers no character of the next line, so that line is left out.
    """
    last = end - 1 if end > start and text[end - 1] == "\n" else end
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", max(last, line_start))
    if line_end == -1:
        line_end = len(text)
    return line_start, line_end


def heading_level(line: str) -> int:
    """Length of the leading '#' run when followed by a space, else 0."""
    m = _HEADING_RE.match(line)
    return len(m.group(1)) if m else 0


# ----------------------------- line transforms -----------------------------


def _heading_transform(level: int) -> LineTransform:
    prefix = title_prefix(level)

    def transform(line: str) -> tuple[str, str]:
        current = heading_level(line)
        body = line[current + 1 :] if current else line
        if current == level:
            return "", body
        return prefix, body

    return transform


def _list_transform(line: str) -> tuple[str, str]:
    if line.startswith(LIST_PREFIX):
        return "", line[len(LIST_PREFIX) :]
    return LIST_PREFIX, line


# ----------------------------- engine -----------------------------


class FormatEngine(IFormatEngine):
    """
    Selection-aware markdown transformations.

    Stateless: every call takes the full text plus a normalized selection and
    returns the replacement text with cursor hints. Nothing is clamped here;
    out-of-range selections are caller bugs and raise immediately.
    """

    def __init__(self) -> None:
        self._handlers = {
            MarkdownAction.BOLD: self._wrap,
            MarkdownAction.ITALIC: self._wrap,
            MarkdownAction.STRIKETHROUGH: self._wrap,
            MarkdownAction.TITLE: self._title,
            MarkdownAction.LIST: self._list,
            MarkdownAction.LINK: self._link,
        }

    def apply(
        self,
        action: MarkdownAction,
        text: str,
        start: int,
        end: int,
        params: FormatParams | None = None,
    ) -> FormatResult:
        handler = self._handlers.get(action) if isinstance(action, MarkdownAction) else None
        if handler is None:
            raise UnsupportedActionError(action)
        if not (0 <= start <= end <= len(text)):
            raise InvalidSelectionError(start, end, len(text))

        result = handler(action, text, start, end, params or FormatParams())
        logger.debug(
            "%s on (%d, %d): %d -> %d chars, cursor=%d, back=%d",
            action.value,
            start,
            end,
            len(text),
            len(result.text),
            result.cursor_offset,
            result.collapse_back_by,
        )
        return result

    # ---------- wrapping ----------

    @staticmethod
    def _wrap(
        action: MarkdownAction, text: str, start: int, end: int, params: FormatParams
    ) -> FormatResult:
        m = action.marker or ""
        n = len(m)

        if start == end:
            # Empty pair; caller steps back n chars to land between the markers.
            return FormatResult(text[:start] + m + m + text[start:], start + 2 * n, n)

        selected = text[start:end]
        if is_wrapped(text, start, end, m):
            new_text = text[: start - n] + selected + text[end + n :]
            return FormatResult(new_text, start - n + len(selected))

        new_text = text[:start] + m + selected + m + text[end:]
        return FormatResult(new_text, start + n + len(selected) + n)

    # ---------- line-scoped ----------

    def _title(
        self, action: MarkdownAction, text: str, start: int, end: int, params: FormatParams
    ) -> FormatResult:
        level = params.title_level
        if (
            isinstance(level, bool)
            or not isinstance(level, int)
            or not MIN_TITLE_LEVEL <= level <= MAX_TITLE_LEVEL
        ):
            raise InvalidTitleLevelError(level)
        return self._prefix_lines(text, start, end, _heading_transform(level))

    def _list(
        self, action: MarkdownAction, text: str, start: int, end: int, params: FormatParams
    ) -> FormatResult:
        return self._prefix_lines(text, start, end, _list_transform)

    @staticmethod
    def _prefix_lines(
        text: str, start: int, end: int, transform: LineTransform
    ) -> FormatResult:
        line_start, line_end = line_bounds(text, start, end)

        parts = [transform(line) for line in text[line_start:line_end].split("\n")]
        block = "\n".join(prefix + body for prefix, body in parts)
        new_text = text[:line_start] + block + text[line_end:]

        if start == end:
            # Single line; caret goes right after the (possibly removed) prefix.
            return FormatResult(new_text, line_start + len(parts[0][0]))
        return FormatResult(new_text, line_start + len(block))

    # ---------- link ----------

    @staticmethod
    def _link(
        action: MarkdownAction, text: str, start: int, end: int, params: FormatParams
    ) -> FormatResult:
        label = params.selected_text if params.selected_text is not None else text[start:end]
        url = params.link_url or ""
        snippet = f"[{label}]({url})"
        return FormatResult(text[:start] + snippet + text[end:], start + len(snippet))


_default_engine = FormatEngine()


def apply_markdown(
    action: MarkdownAction,
    text: str,
    start: int,
    end: int,
    params: FormatParams | None = None,
) -> FormatResult:
    """Module-level shortcut around a shared (stateless) FormatEngine."""
    return _default_engine.apply(action, text, start, end, params)
