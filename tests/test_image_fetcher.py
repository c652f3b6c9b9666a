"""Tests du téléchargement et du décodage des images."""

from __future__ import annotations

import base64
from http.client import IncompleteRead
from pathlib import Path
from urllib.error import HTTPError

import pytest
from PIL import Image

from urlview.services import ImageFetcher, ImageFetchError
from urlview.services import image_fetcher

from conftest import PNG_1X1_BYTES


def test_fetch_decodes_file_url(png_file: Path) -> None:
    image = ImageFetcher().fetch(png_file.as_uri())
    assert image.mode == "RGBA"
    assert image.size == (1, 1)


def test_fetch_decodes_data_url() -> None:
    url = "data:image/png;base64," + base64.b64encode(PNG_1X1_BYTES).decode("ascii")
    image = ImageFetcher().fetch(url)
    assert image.size == (1, 1)


def test_fetch_shrinks_large_image_keeping_ratio(tmp_path: Path) -> None:
    path = tmp_path / "wide.png"
    Image.new("RGB", (1200, 300), "indigo").save(path)

    image = ImageFetcher(max_size=600).fetch(path.as_uri())

    assert image.size == (600, 150)


def test_fetch_never_enlarges_small_image(tmp_path: Path) -> None:
    path = tmp_path / "small.png"
    Image.new("RGB", (40, 20), "red").save(path)

    image = ImageFetcher(max_size=600).fetch(path.as_uri())

    assert image.size == (40, 20)


@pytest.mark.parametrize("url", ["", "pas une url", "ftp://example.com/a.png", "javascript:alert(1)"])
def test_fetch_rejects_unusable_urls(url: str) -> None:
    with pytest.raises(ImageFetchError):
        ImageFetcher().fetch(url)


def test_fetch_fails_on_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ImageFetchError, match="Téléchargement impossible"):
        ImageFetcher().fetch((tmp_path / "absent.png").as_uri())


def test_fetch_fails_on_non_image_content(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_text("<html></html>", encoding="utf-8")
    with pytest.raises(ImageFetchError, match="pas une image"):
        ImageFetcher().fetch(path.as_uri())


def test_fetch_wraps_http_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(request, timeout):
        raise HTTPError(request.full_url, 404, "Not Found", hdrs=None, fp=None)

    monkeypatch.setattr(image_fetcher, "urlopen", fake_urlopen)
    with pytest.raises(ImageFetchError, match="404"):
        ImageFetcher().fetch("https://example.com/missing.png")


def test_fetch_wraps_timeouts_and_passes_configured_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_urlopen(request, timeout):
        seen["timeout"] = timeout
        seen["agent"] = request.get_header("User-agent")
        raise TimeoutError("timed out")

    monkeypatch.setattr(image_fetcher, "urlopen", fake_urlopen)
    with pytest.raises(ImageFetchError):
        ImageFetcher(timeout=2.5, user_agent="tests/0").fetch("https://example.com/slow.png")

    assert seen == {"timeout": 2.5, "agent": "tests/0"}


def test_fetch_rejects_decompression_bomb(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "bomb.png"
    Image.new("RGB", (100, 100), "white").save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    with pytest.raises(ImageFetchError, match="trop grande"):
        ImageFetcher().fetch(path.as_uri())


def test_fetch_wraps_incomplete_reads(monkeypatch: pytest.MonkeyPatch) -> None:
    class TruncatedResponse:
        def __enter__(self):
            return self

        def __exit__(self, *_: object) -> None:
            return None

        def read(self, amount: int) -> bytes:
            raise IncompleteRead(b"\x89PNG", 1000)

    monkeypatch.setattr(image_fetcher, "urlopen", lambda request, timeout: TruncatedResponse())
    with pytest.raises(ImageFetchError, match="Téléchargement impossible"):
        ImageFetcher().fetch("https://example.com/cut.png")


def test_fetch_rejects_body_over_byte_cap(png_file: Path) -> None:
    with pytest.raises(ImageFetchError, match="trop volumineux"):
        ImageFetcher(max_bytes=10).fetch(png_file.as_uri())

    assert ImageFetcher(max_bytes=len(PNG_1X1_BYTES)).fetch(png_file.as_uri()).size == (1, 1)
