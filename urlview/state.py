"""État observable partagé entre la couche UI et les services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class LoadPhase(Enum):
    """Étapes du chargement de l'image courante."""

    EMPTY = "empty"
    LOADING = "loading"
    DISPLAYED = "displayed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Copie figée de l'état transmise aux abonnés."""

    image_url: str
    has_error: bool
    is_menu_open: bool


Subscriber = Callable[[ViewSnapshot], None]


@dataclass(slots=True)
class ViewState:
    """État interne de la visionneuse.

    Chaque mutation notifie les abonnés de façon synchrone, après la mise à
    jour complète des champs.
    """

    image_url: str = ""
    has_error: bool = False
    is_menu_open: bool = False
    _outcome_reported: bool = field(default=False, repr=False)
    _subscribers: list[Subscriber] = field(default_factory=list, repr=False)

    @property
    def phase(self) -> LoadPhase:
        """Retourne l'étape de chargement déduite de l'état courant."""
        if not self.image_url:
            return LoadPhase.EMPTY
        if self.has_error:
            return LoadPhase.FAILED
        if self._outcome_reported:
            return LoadPhase.DISPLAYED
        return LoadPhase.LOADING

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            image_url=self.image_url,
            has_error=self.has_error,
            is_menu_open=self.is_menu_open,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Enregistre un abonné et retourne la fonction de désabonnement."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------- Mutations -
    def set_image_url(self, url: str) -> None:
        """Remplace l'URL et efface l'erreur, même si l'URL est identique."""
        self.image_url = url
        self.has_error = False
        self._outcome_reported = False
        self._notify()

    def set_error(self, flag: bool) -> None:
        self.has_error = flag
        self._outcome_reported = True
        self._notify()

    def toggle_menu(self) -> None:
        self.is_menu_open = not self.is_menu_open
        self._notify()

    def close_menu(self) -> None:
        self.is_menu_open = False
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in tuple(self._subscribers):
            callback(snapshot)
