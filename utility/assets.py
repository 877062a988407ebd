# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Description: assets.py
# -----------------------------------------------------------------------------
import base64
from pathlib import Path

IMAGE_URI_PREFIXES = ("data:image/", "http://", "https://")
IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png", ".gif", ".webp")


def is_image_reference(text: str) -> bool:
    """
    True if a chunk points at an image rather than holding text:
    a data URI, an http(s) URL, or a path ending in a known image extension.
    Suffix match is case-sensitive.
    """
    return text.startswith(IMAGE_URI_PREFIXES) or text.endswith(IMAGE_SUFFIXES)


def img_to_data_uri(path: str | Path) -> str:
    """
    Load a local image file and return a data URI suitable for embedding in HTML.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Image not found: {p}")

    mime = "image/png" if p.suffix.lower() == ".png" else "image/jpeg"

    data = p.read_bytes()
    b64 = base64.b64encode(data).decode("utf-8")
    return f"data:{mime};base64,{b64}"


def resolve_image_reference(chunk: str, base_dir: str | Path) -> str:
    """
    Make an image chunk self-contained for the browser.

    Data URIs and http(s) URLs are returned as-is. Any other image reference
    is read from disk relative to base_dir and inlined as a data URI.
    Text chunks are returned unchanged.
    """
    if not is_image_reference(chunk) or chunk.startswith(IMAGE_URI_PREFIXES):
        return chunk

    return img_to_data_uri(Path(base_dir) / chunk)
