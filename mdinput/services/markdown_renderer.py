# mdinput/services/markdown_renderer.py
from __future__ import annotations

import markdown

from mdinput.domain.interfaces import IMarkdownRenderer
from mdinput.utils.constants import CSS_PREVIEW, HTML_TEMPLATE


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts the edited Markdown to a preview HTML page.

    Covers what the toolbar produces: emphasis, headings, links and lists from
    core Markdown, plus ~~strikethrough~~ via pymdownx.tilde.
    """

    def __init__(self, extra_extensions: list[str] | None = None) -> None:
        self._extensions = [
            "extra",
            "fenced_code",
            "codehilite",
            "sane_lists",
            "pymdownx.tilde",
            *(extra_extensions or []),
        ]
        self._ext_cfg = {
            "codehilite": {"guess_lang": False, "noclasses": True},
            # Only ~~del~~; leave single ~ alone.
            "pymdownx.tilde": {"subscript": False},
        }

    def to_html(self, markdown_text: str) -> str:
        body = markdown.markdown(
            markdown_text,
            extensions=self._extensions,
            extension_configs=self._ext_cfg,
            output_format="html5",
        )
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body)
