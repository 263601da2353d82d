"""Constants and builders shared by the test modules."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

GEMINI_BASE = "https://gemini.test/v1beta"
VISION_URL = "https://vision.test/v1/images:annotate"
MODELS = ["model-a", "model-b", "model-c"]


def gemini_url(model: str) -> str:
    return f"{GEMINI_BASE}/models/{model}:generateContent"


def gemini_answer(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}, "finishReason": "STOP"}]}


def encode_image(fmt: str = "JPEG", size: tuple[int, int] = (8, 6)) -> str:
    buf = BytesIO()
    Image.new("RGB", size, (200, 40, 40)).save(buf, format=fmt)
    return base64.b64encode(buf.getvalue()).decode("ascii")
