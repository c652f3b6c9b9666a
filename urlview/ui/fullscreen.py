"""Plein écran de la fenêtre Tk."""

from __future__ import annotations

import tkinter as tk


class TkFullscreenControl:
    """Active ou désactive le plein écran de la fenêtre principale."""

    def __init__(self, root: tk.Tk) -> None:
        self._root = root

    @property
    def is_fullscreen(self) -> bool:
        return bool(self._root.attributes("-fullscreen"))

    def enter(self) -> None:
        self._root.attributes("-fullscreen", True)

    def exit(self) -> None:
        self._root.attributes("-fullscreen", False)
