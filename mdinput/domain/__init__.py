"""Domain layer: interfaces, errors and value objects (dataclasses)."""

from .errors import (
    FormatError,
    InvalidSelectionError,
    InvalidTitleLevelError,
    UnsupportedActionError,
)
from .interfaces import IConfigService, IEditorSurface, IFormatEngine, IMarkdownRenderer
from .models import (
    CursorPlacement,
    FormatParams,
    FormatResult,
    LinkRequest,
    MarkdownAction,
    SelectionRange,
)

__all__ = [
    "IFormatEngine",
    "IMarkdownRenderer",
    "IEditorSurface",
    "IConfigService",
    "FormatError",
    "InvalidSelectionError",
    "InvalidTitleLevelError",
    "UnsupportedActionError",
    "CursorPlacement",
    "FormatParams",
    "FormatResult",
    "LinkRequest",
    "MarkdownAction",
    "SelectionRange",
]
