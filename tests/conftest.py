"""Fixtures pytest partagées."""

from __future__ import annotations

import base64
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


PNG_1X1_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+fJ8AAAAASUVORK5CYII="
)


class FakeFullscreen:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def enter(self) -> None:
        self.calls.append("enter")

    def exit(self) -> None:
        self.calls.append("exit")


class FakeRoot:
    """Remplace la fenêtre Tk : mémorise les rappels ``after`` et les attributs."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[int, object]] = []
        self._attributes: dict[str, object] = {"-fullscreen": 0}

    def after(self, delay_ms: int, callback) -> str:
        self.scheduled.append((delay_ms, callback))
        return f"after#{len(self.scheduled)}"

    def run_scheduled(self) -> None:
        pending, self.scheduled = self.scheduled, []
        for _, callback in pending:
            callback()

    def attributes(self, name: str, *value: object):
        if value:
            self._attributes[name] = value[0]
            return ""
        return self._attributes[name]


@pytest.fixture
def state():
    from urlview.state import ViewState

    return ViewState()


@pytest.fixture
def fullscreen() -> FakeFullscreen:
    return FakeFullscreen()


@pytest.fixture
def fake_root() -> FakeRoot:
    return FakeRoot()


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "pixel.png"
    path.write_bytes(PNG_1X1_BYTES)
    return path
