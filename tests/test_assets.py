# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Description: test_assets.py
# -----------------------------------------------------------------------------
import pytest

from conftest import PNG_BYTES
from utility.assets import img_to_data_uri, is_image_reference, resolve_image_reference


@pytest.mark.parametrize(
    "text",
    [
        "data:image/png;base64,iVBORw0KGgo=",
        "https://example.com/x.png",
        "http://example.com/page",
        "photos/holiday.jpg",
        "a.jpeg",
        "b.gif",
        "c.webp",
        "/abs/path/d.png",
    ],
)
def test_image_references(text):
    assert is_image_reference(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "The quick brown fox",
        "photo.PNG",  # suffix match is case-sensitive
        "data:text/plain;base64,aGk=",
        "ftp://example.com/x.png.txt",
    ],
)
def test_text_is_not_an_image_reference(text):
    assert not is_image_reference(text)


def test_img_to_data_uri_png(tmp_path):
    p = tmp_path / "pixel.png"
    p.write_bytes(PNG_BYTES)

    uri = img_to_data_uri(p)
    assert uri.startswith("data:image/png;base64,")


@pytest.mark.parametrize("name", ["a.jpg", "a.jpeg", "a.gif", "a.webp"])
def test_img_to_data_uri_defaults_to_jpeg(tmp_path, name):
    p = tmp_path / name
    p.write_bytes(b"bytes")

    assert img_to_data_uri(p) == "data:image/jpeg;base64,Ynl0ZXM="


def test_img_to_data_uri_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        img_to_data_uri(tmp_path / "missing.png")


def test_resolve_passes_through_urls_and_text(tmp_path):
    assert resolve_image_reference("https://example.com/x.png", tmp_path) == "https://example.com/x.png"
    assert resolve_image_reference("data:image/png;base64,AA==", tmp_path) == "data:image/png;base64,AA=="
    assert resolve_image_reference("just some text", tmp_path) == "just some text"


def test_resolve_is_relative_to_base_dir(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "x.gif").write_bytes(b"GIF89a")

    assert resolve_image_reference("sub/x.gif", tmp_path).startswith("data:image/jpeg;base64,")
