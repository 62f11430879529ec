"""Concrete service implementations: format engine, selection session, preview renderer."""

from .format_engine import FormatEngine, apply_markdown
from .markdown_renderer import MarkdownRenderer
from .selection_session import SelectionSession

__all__ = ["FormatEngine", "MarkdownRenderer", "SelectionSession", "apply_markdown"]
