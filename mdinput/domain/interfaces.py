from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from mdinput.domain.models import FormatParams, FormatResult, MarkdownAction


class IFormatEngine(Protocol):
    """Pure text transformation: (action, text, selection) -> FormatResult."""

    def apply(
        self,
        action: MarkdownAction,
        text: str,
        start: int,
        end: int,
        params: FormatParams | None = None,
    ) -> FormatResult: ...


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to full HTML string (including CSS)."""

    def to_html(self, markdown_text: str) -> str: ...


class IEditorSurface(Protocol):
    """What a formatting command needs from a text-editing widget (code point offsets)."""

    def text(self) -> str: ...
    def replace_text(self, text: str) -> None: ...
    def set_cursor(self, offset: int) -> None: ...
    def request_focus(self) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_list(self, section: str, key: str, default: list[str] | None = None) -> list[str] | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
