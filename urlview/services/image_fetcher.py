"""Récupération et décodage des images distantes."""

from __future__ import annotations

import io
import logging
from http.client import HTTPException
from urllib.error import URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from PIL import Image, UnidentifiedImageError

from urlview.config import DEFAULT_IMAGE_MAX, DEFAULT_MAX_BYTES, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https", "file", "data")
DEFAULT_USER_AGENT = "urlview/1.0"


class ImageFetchError(RuntimeError):
    """Erreur levée lorsqu'une image ne peut pas être chargée."""


class ImageFetcher:
    """Télécharge une image et la prépare pour l'affichage."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_size: int = DEFAULT_IMAGE_MAX,
        max_bytes: int = DEFAULT_MAX_BYTES,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._max_size = max_size
        self._max_bytes = max_bytes
        self._user_agent = user_agent

    def fetch(self, url: str) -> Image.Image:
        """Retourne l'image RGBA réduite pour tenir dans ``max_size``."""
        if not url:
            raise ImageFetchError("Aucune URL fournie.")

        scheme = urlparse(url).scheme.lower()
        if scheme not in SUPPORTED_SCHEMES:
            raise ImageFetchError(f"Schéma d'URL non pris en charge : {scheme or '(aucun)'}")

        request = Request(url, headers={"User-Agent": self._user_agent})
        try:
            with urlopen(request, timeout=self._timeout) as response:
                data = response.read(self._max_bytes + 1)
        except (URLError, HTTPException, OSError, ValueError) as exc:
            raise ImageFetchError(f"Téléchargement impossible : {exc}") from exc

        if len(data) > self._max_bytes:
            raise ImageFetchError(f"Fichier trop volumineux (plus de {self._max_bytes} octets).")

        buffer = io.BytesIO(data)

        try:
            image = Image.open(buffer)
            image.load()
        except Image.DecompressionBombError as exc:
            raise ImageFetchError("Image trop grande pour être affichée.") from exc
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise ImageFetchError("Le contenu reçu n'est pas une image lisible.") from exc

        image = image.convert("RGBA")
        image.thumbnail((self._max_size, self._max_size), Image.LANCZOS)
        logger.debug("Image chargée depuis %s (%dx%d)", url, *image.size)
        return image
