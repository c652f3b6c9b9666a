"""Points de contact avec l'environnement hôte (plein écran, chargement d'image)."""

from __future__ import annotations

from typing import Protocol

from urlview.state import ViewState


class HostFullscreenControl(Protocol):
    """Requêtes de plein écran envoyées à l'hôte, sans accusé de réception."""

    def enter(self) -> None: ...

    def exit(self) -> None: ...


class NativeImageLoader(Protocol):
    """Reçoit le résultat d'une tentative de chargement d'image."""

    def on_outcome(self, success: bool) -> None: ...


class ViewStateImageOutcome:
    """Répercute le résultat d'un chargement sur l'état de la visionneuse."""

    def __init__(self, state: ViewState) -> None:
        self._state = state

    def on_outcome(self, success: bool) -> None:
        self._state.set_error(not success)
