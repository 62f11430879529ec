from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from mdinput.domain.interfaces import IConfigService
from mdinput.domain.models import MarkdownAction
from mdinput.services.config.ini_config_service import IniConfigService
from mdinput.utils.constants import DEFAULT_ACTIONS, DEFAULT_LOG_LEVEL, DEFAULT_MAX_LINES

logger = logging.getLogger(__name__)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    # editor_config.py -> mdinput/services/config/editor_config.py
    return Path(__file__).resolve().parents[3]


def parse_actions(names: list[str]) -> tuple[MarkdownAction, ...]:
    """Map configured names to actions, keeping order and dropping unknowns and repeats."""
    actions: list[MarkdownAction] = []
    for name in names:
        try:
            action = MarkdownAction.from_name(name)
        except KeyError:
            logger.warning("Ignoring unknown toolbar action %r", name)
            continue
        if action not in actions:
            actions.append(action)
    return tuple(actions)


@dataclass(frozen=True)
class EditorConfig:
    """Settings for one MarkdownTextInput, read from the [editor] and [logging] sections."""

    actions: tuple[MarkdownAction, ...] = tuple(MarkdownAction(a) for a in DEFAULT_ACTIONS)
    insert_links_by_dialog: bool = True
    max_lines: int = DEFAULT_MAX_LINES
    hint: str = ""
    right_to_left: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_service(cls, cfg: IConfigService) -> EditorConfig:
        names = cfg.get_list("editor", "actions", list(DEFAULT_ACTIONS)) or []
        max_lines = cfg.get_int("editor", "max_lines", DEFAULT_MAX_LINES)
        if max_lines is None or max_lines < 1:
            max_lines = DEFAULT_MAX_LINES
        return cls(
            actions=parse_actions(names),
            insert_links_by_dialog=bool(cfg.get_bool("editor", "insert_links_by_dialog", True)),
            max_lines=max_lines,
            hint=cfg.get("editor", "hint", "") or "",
            right_to_left=bool(cfg.get_bool("editor", "right_to_left", False)),
            log_level=(cfg.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL)
            .strip()
            .upper(),
        )


def build_editor_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> EditorConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return EditorConfig.from_service(ini)
