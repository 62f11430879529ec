from __future__ import annotations

from .link_prompt import ILinkPrompt

__all__ = [
    "ILinkPrompt",
]
