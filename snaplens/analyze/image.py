"""
Purpose:
- Turn the client's base64 string into a payload both providers accept.
- Accepts bare base64 or a data URL; sniffs the real format with Pillow.

Notes:
- The capture client sends JPEG, so anything Pillow cannot identify is forwarded as image/jpeg.
"""

from __future__ import annotations
import base64
import binascii
import re
from dataclasses import dataclass
from io import BytesIO
from typing import Optional
from loguru import logger
from PIL import Image, UnidentifiedImageError
from ..core.errors import InvalidImageError

DEFAULT_MIME = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>image/[\w.+-]+);base64,", re.IGNORECASE)

@dataclass(frozen=True)
class ImagePayload:
    data: str          # base64, no prefix, no whitespace
    mime_type: str
    size: int          # decoded byte count
    width: Optional[int] = None
    height: Optional[int] = None

def _sniff(raw: bytes):
    try:
        with Image.open(BytesIO(raw)) as img:
            fmt = img.format
            w, h = img.size
    except (UnidentifiedImageError, OSError):
        return None, None, None
    return Image.MIME.get(fmt or ""), w, h

def normalize_base64(payload: str, max_bytes: int) -> ImagePayload:
    if not payload or not payload.strip():
        raise InvalidImageError("Image payload is empty")

    text = payload.strip()
    declared = None
    m = _DATA_URL_RE.match(text)
    if m:
        declared = m.group("mime").lower()
        text = text[m.end():]
    text = "".join(text.split())

    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidImageError("Image payload is not valid base64") from None

    if not raw:
        raise InvalidImageError("Image payload is empty")
    if len(raw) > max_bytes:
        raise InvalidImageError(f"Image is too large ({len(raw)} bytes, limit {max_bytes})")

    mime, w, h = _sniff(raw)
    if mime is None:
        mime = declared or DEFAULT_MIME
        logger.warning("Could not identify image format; forwarding as {}", mime)

    return ImagePayload(data=text, mime_type=mime, size=len(raw), width=w, height=h)
