"""Visionneuse d'images à partir d'une URL."""

__version__ = "1.0.0"
