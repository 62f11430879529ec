"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    DEFAULT_ACTIONS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_LINES,
    HTML_TEMPLATE,
)
from .offsets import to_code_points, to_code_units

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "DEFAULT_ACTIONS",
    "DEFAULT_MAX_LINES",
    "DEFAULT_LOG_LEVEL",
    "to_code_points",
    "to_code_units",
]
