from __future__ import annotations

from pathlib import Path

from mdinput.domain.interfaces import IMarkdownRenderer
from mdinput.services.config.editor_config import EditorConfig, build_editor_config
from mdinput.services.markdown_renderer import MarkdownRenderer
from mdinput.services.ui.main_window import MainWindow
from mdinput.services.ui.ports.link_prompt import ILinkPrompt


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the demo window around a MarkdownTextInput
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        link_prompt: ILinkPrompt | None = None,
    ) -> None:
        self.config: EditorConfig = config or EditorConfig()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        # None lets the widget fall back to its own Qt dialog.
        self.link_prompt = link_prompt

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        """Container with config loaded from the usual INI locations."""
        return Container(config=build_editor_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        initial_text: str = "",
        app_title: str = "Markdown Text Input",
    ) -> MainWindow:
        return MainWindow(
            renderer=self.renderer,
            config=self.config,
            initial_text=initial_text,
            link_prompt=self.link_prompt,
            app_title=app_title,
        )
