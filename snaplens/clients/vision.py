"""
Purpose:
- Call the Cloud Vision images:annotate REST API for a single image.
- Returns the first (only) entry of "responses" for the caller to format.
"""

from __future__ import annotations
from typing import Any, Dict, List
import httpx
from loguru import logger
from ..analyze.image import ImagePayload
from ..core.errors import ConfigurationError, UpstreamError
from ..core.settings import settings

def annotate(image: ImagePayload, features: List[Dict[str, Any]]) -> Dict[str, Any]:
    api_key = settings.google_api_key
    if not api_key:
        raise ConfigurationError("API Key not configured")

    body = {
        "requests": [{
            "image": {"content": image.data},
            "features": features,
        }]
    }
    try:
        r = httpx.post(settings.vision_endpoint, params={"key": api_key}, json=body,
                       timeout=settings.request_timeout)
        data = r.json()
    except httpx.HTTPError as e:
        logger.error("Vision request failed: {}", e)
        raise UpstreamError(f"{type(e).__name__}: {e}") from e
    except ValueError:
        raise UpstreamError(f"Vision API returned non-JSON (HTTP {r.status_code})") from None

    if not isinstance(data, dict):
        raise UpstreamError("No response from Vision API")

    # Whole-request failure (bad key, quota) comes back as a top-level error
    if isinstance(data.get("error"), dict):
        raise UpstreamError(data["error"].get("message") or f"Vision API HTTP {r.status_code}")

    responses = data.get("responses") or []
    res = responses[0] if isinstance(responses, list) and responses else None
    # An empty dict is a valid "nothing detected" answer
    if not isinstance(res, dict):
        raise UpstreamError("No response from Vision API")

    # Per-image failure
    if isinstance(res.get("error"), dict):
        raise UpstreamError(res["error"].get("message") or "Vision API could not process the image")
    return res
