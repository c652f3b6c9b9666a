"""Chargement des images hors du thread Tk."""

from __future__ import annotations

import logging
import queue
import threading
import tkinter as tk
from dataclasses import dataclass
from typing import Callable

from PIL import Image

from urlview.ports import NativeImageLoader
from urlview.services import ImageFetcher, ImageFetchError

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 50

ImageCallback = Callable[[Image.Image], None]


def _start_daemon_thread(target: Callable[[], None]) -> None:
    threading.Thread(target=target, name="image-loader", daemon=True).start()


@dataclass(frozen=True, slots=True)
class _LoadResult:
    generation: int
    url: str
    image: Image.Image | None
    error: ImageFetchError | None


class BackgroundImageLoader:
    """Télécharge dans un thread et remet le résultat sur la boucle Tk.

    Seule la dernière requête est livrée : le résultat d'une requête
    remplacée entre-temps est ignoré.
    """

    def __init__(
        self,
        root: tk.Misc,
        fetcher: ImageFetcher,
        *,
        poll_interval_ms: int = POLL_INTERVAL_MS,
        run_in_thread: Callable[[Callable[[], None]], None] = _start_daemon_thread,
    ) -> None:
        self._root = root
        self._fetcher = fetcher
        self._poll_interval_ms = poll_interval_ms
        self._run_in_thread = run_in_thread
        self._results: queue.Queue[_LoadResult] = queue.Queue()
        self._generation = 0
        self._on_image: ImageCallback | None = None
        self._outcome: NativeImageLoader | None = None
        self._after_id: str | None = None

    @property
    def is_pending(self) -> bool:
        return self._outcome is not None

    def load(self, url: str, on_image: ImageCallback, outcome: NativeImageLoader) -> None:
        self._generation += 1
        generation = self._generation
        self._on_image = on_image
        self._outcome = outcome

        def work() -> None:
            try:
                image = self._fetcher.fetch(url)
            except ImageFetchError as exc:
                self._results.put(_LoadResult(generation, url, None, exc))
            except Exception as exc:  # noqa: BLE001
                logger.exception("Erreur inattendue pendant le chargement de %s", url)
                error = ImageFetchError(f"Erreur inattendue : {exc}")
                self._results.put(_LoadResult(generation, url, None, error))
            else:
                self._results.put(_LoadResult(generation, url, image, None))

        self._run_in_thread(work)
        self._schedule_poll()

    def cancel(self) -> None:
        """Abandonne la requête en cours ; son résultat sera ignoré."""
        self._generation += 1
        self._on_image = None
        self._outcome = None

    def _schedule_poll(self) -> None:
        if self._after_id is None:
            self._after_id = self._root.after(self._poll_interval_ms, self._poll)

    def _poll(self) -> None:
        self._after_id = None
        while True:
            try:
                result = self._results.get_nowait()
            except queue.Empty:
                break
            self._deliver(result)

        if self.is_pending:
            self._schedule_poll()

    def _deliver(self, result: _LoadResult) -> None:
        if result.generation != self._generation or self._outcome is None:
            logger.debug("Résultat obsolète ignoré pour %s", result.url)
            return

        on_image, outcome = self._on_image, self._outcome
        self._on_image = None
        self._outcome = None

        if result.error is not None:
            logger.warning("Chargement de %s impossible : %s", result.url, result.error)
            outcome.on_outcome(False)
            return

        if on_image is not None and result.image is not None:
            on_image(result.image)
        outcome.on_outcome(True)
