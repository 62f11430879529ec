from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from mdinput.di.container import Container
from mdinput.utils.constants import APP_NAME, APP_ORG, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    """Install the root handler once; later calls only change the level."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.

    argv[1], if given, is a text file whose content seeds the editor.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    # Config loading logs too, so a handler must exist before the container.
    configure_logging(DEFAULT_LOG_LEVEL)
    container = Container.default()
    configure_logging(container.config.log_level)

    initial_text = ""
    if len(argv) > 1:
        path = Path(argv[1])
        try:
            initial_text = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)

    win = container.build_main_window(initial_text=initial_text, app_title=APP_NAME)
    win.show()

    return app.exec()
