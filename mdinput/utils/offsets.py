"""
Qt reports text positions in UTF-16 code units; Python strings index code points.
Characters outside the BMP (most emoji) take two units in Qt and one in Python.
"""

from __future__ import annotations


def _units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def to_code_units(text: str, index: int) -> int:
    """Python string index -> UTF-16 offset."""
    return index + sum(1 for ch in text[:index] if ord(ch) > 0xFFFF)


def to_code_points(text: str, units: int) -> int:
    """UTF-16 offset -> Python string index. An offset inside a surrogate pair rounds down."""
    if units <= 0:
        return 0
    seen = 0
    for i, ch in enumerate(text):
        seen += _units(ch)
        if seen == units:
            return i + 1
        if seen > units:
            return i
    return len(text)
