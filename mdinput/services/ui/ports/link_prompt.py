from __future__ import annotations

from typing import Protocol, runtime_checkable

from mdinput.domain.models import LinkRequest


@runtime_checkable
class ILinkPrompt(Protocol):
    """
    Abstract UI port for collecting a link label and URL. Keeps commands decoupled from Qt.
    """

    def ask_link(self, initial_label: str) -> LinkRequest | None:
        """Return the confirmed label/URL, or None if the user cancelled."""
        ...
