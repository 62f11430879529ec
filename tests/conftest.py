from __future__ import annotations

import os

# Headless Qt for CI and plain terminals; must be set before QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from mdinput.services.format_engine import FormatEngine  # noqa: E402
from mdinput.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from mdinput.services.selection_session import SelectionSession  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def engine() -> FormatEngine:
    return FormatEngine()


@pytest.fixture()
def session() -> SelectionSession:
    return SelectionSession()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()
