"""Traduction des événements de l'interface en mutations de l'état."""

from __future__ import annotations

import logging

from urlview.ports import HostFullscreenControl, ViewStateImageOutcome
from urlview.state import ViewState

logger = logging.getLogger(__name__)


class ViewerController:
    """Relie les gestes de l'utilisateur à l'état et au plein écran.

    Aucune méthode ne lève d'exception : une URL quelconque est acceptée,
    sa validité n'est connue qu'au retour du chargement.
    """

    def __init__(self, state: ViewState, fullscreen: HostFullscreenControl) -> None:
        self._state = state
        self._fullscreen = fullscreen
        self._image_outcome = ViewStateImageOutcome(state)

    @property
    def state(self) -> ViewState:
        return self._state

    # ------------------------------------------------------------------ Image -
    def submit_url(self, text: str) -> None:
        """Soumet le texte saisi (touche Entrée ou bouton de chargement)."""
        url = text.strip()
        logger.info("Chargement demandé : %r", url)
        self._state.set_image_url(url)

    def on_outcome(self, success: bool) -> None:
        """Résultat du chargement de l'image courante."""
        self._image_outcome.on_outcome(success)

    def on_image_double_click(self) -> None:
        self._fullscreen.enter()

    # ------------------------------------------------------------------- Menu -
    def on_menu_button(self) -> None:
        self._state.toggle_menu()

    def on_scrim_pressed(self) -> None:
        self._state.close_menu()

    def on_enter_fullscreen(self) -> None:
        self._fullscreen.enter()
        self._state.close_menu()

    def on_exit_fullscreen(self) -> None:
        self._fullscreen.exit()
        self._state.close_menu()

    def on_escape(self) -> None:
        """Quitte le plein écran, comme le ferait un navigateur."""
        self._fullscreen.exit()
