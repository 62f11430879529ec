from __future__ import annotations

from .apply_markdown import ApplyMarkdown, apply_to_surface
from .insert_link import InsertLink

__all__ = [
    "ApplyMarkdown",
    "InsertLink",
    "apply_to_surface",
]
