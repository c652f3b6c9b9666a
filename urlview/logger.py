"""Configuration de la journalisation de l'application."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure le logger racine une seule fois et retourne le logger du paquet."""
    root = logging.getLogger()
    if not getattr(root, "_urlview_logging_configured", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root._urlview_logging_configured = True  # type: ignore[attr-defined]
    root.setLevel(level)
    return logging.getLogger("urlview")
