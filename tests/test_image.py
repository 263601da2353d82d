"""Base64 payload normalisation."""

from __future__ import annotations

import base64

import pytest

from snaplens.analyze.image import DEFAULT_MIME, normalize_base64
from snaplens.core.errors import InvalidImageError

LIMIT = 1024 * 1024


def test_jpeg_is_identified(jpeg_b64: str) -> None:
    payload = normalize_base64(jpeg_b64, LIMIT)
    assert payload.mime_type == "image/jpeg"
    assert payload.data == jpeg_b64
    assert (payload.width, payload.height) == (8, 6)
    assert payload.size == len(base64.b64decode(jpeg_b64))


def test_png_is_identified(png_b64: str) -> None:
    assert normalize_base64(png_b64, LIMIT).mime_type == "image/png"


def test_data_url_prefix_and_whitespace_are_stripped(jpeg_b64: str) -> None:
    wrapped = "data:image/jpeg;base64," + jpeg_b64[:20] + "\n" + jpeg_b64[20:]
    payload = normalize_base64(wrapped, LIMIT)
    assert payload.data == jpeg_b64
    assert payload.mime_type == "image/jpeg"


def test_unidentified_bytes_fall_back_to_jpeg() -> None:
    blob = base64.b64encode(b"not really an image").decode()
    payload = normalize_base64(blob, LIMIT)
    assert payload.mime_type == DEFAULT_MIME
    assert payload.width is None


@pytest.mark.parametrize("bad", ["", "   ", "@@not base64@@", "data:image/png;base64,"])
def test_bad_payloads_are_rejected(bad: str) -> None:
    with pytest.raises(InvalidImageError):
        normalize_base64(bad, LIMIT)


def test_oversized_payload_is_rejected(jpeg_b64: str) -> None:
    with pytest.raises(InvalidImageError, match="too large"):
        normalize_base64(jpeg_b64, 10)
