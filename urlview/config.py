"""Gestion centralisée de la configuration de la visionneuse."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TITLE = "Visionneuse d'images"
DEFAULT_THEME = "light"
DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 700
DEFAULT_IMAGE_MAX = 600
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_BYTES = 50 * 1024 * 1024
DEFAULT_LOG_LEVEL = "INFO"
_THEMES = ("light", "dark")


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Paramètres de la fenêtre et du chargement des images."""

    title: str = DEFAULT_TITLE
    theme: str = DEFAULT_THEME
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    image_max_size: int = DEFAULT_IMAGE_MAX
    timeout: float = DEFAULT_TIMEOUT
    max_bytes: int = DEFAULT_MAX_BYTES
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un entier (reçu : {raw!r}).") from exc
    if value <= 0:
        raise ConfigError(f"{name} doit être strictement positif (reçu : {value}).")
    return value


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un nombre (reçu : {raw!r}).") from exc
    if value <= 0:
        raise ConfigError(f"{name} doit être strictement positif (reçu : {value}).")
    return value


def load_config() -> ViewerConfig:
    """Charge la configuration depuis l'environnement et le fichier .env."""
    load_dotenv()

    theme = os.getenv("URLVIEW_THEME", DEFAULT_THEME).strip().lower()
    if theme not in _THEMES:
        raise ConfigError(f"URLVIEW_THEME doit valoir 'light' ou 'dark' (reçu : {theme!r}).")

    log_level = os.getenv("URLVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"URLVIEW_LOG_LEVEL inconnu : {log_level!r}.")

    return ViewerConfig(
        title=os.getenv("URLVIEW_TITLE", DEFAULT_TITLE),
        theme=theme,
        width=_positive_int("URLVIEW_WIDTH", DEFAULT_WIDTH),
        height=_positive_int("URLVIEW_HEIGHT", DEFAULT_HEIGHT),
        image_max_size=_positive_int("URLVIEW_IMAGE_MAX", DEFAULT_IMAGE_MAX),
        timeout=_positive_float("URLVIEW_TIMEOUT", DEFAULT_TIMEOUT),
        max_bytes=_positive_int("URLVIEW_MAX_BYTES", DEFAULT_MAX_BYTES),
        log_level=log_level,
    )
