"""
Purpose:
- Call the Gemini generateContent REST API with a prompt + one inline image.
- Walk settings.gemini_models in order; the first model that answers wins.

Notes:
- Requires: settings.google_api_key (from .env or env)
- A failed model (HTTP error, transport error, empty/blocked answer) only moves us to the next one;
  the last failure is what the caller sees when none succeed.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import httpx
from loguru import logger
from ..analyze.image import ImagePayload
from ..core.errors import ConfigurationError, UpstreamError
from ..core.settings import settings

def _request_body(prompt: str, image: ImagePayload) -> Dict[str, Any]:
    return {
        "contents": [{
            "parts": [
                {"text": prompt},
                {"inline_data": {"mime_type": image.mime_type, "data": image.data}},
            ]
        }]
    }

def _error_message(resp: httpx.Response) -> str:
    # Google APIs wrap failures as {"error": {"code", "message", "status"}}
    try:
        body = resp.json()
    except ValueError:
        body = None
    err = body.get("error") if isinstance(body, dict) else None
    msg = err.get("message") if isinstance(err, dict) else None
    return f"HTTP {resp.status_code}: {msg or resp.reason_phrase}"

def extract_text(data: Any) -> str:
    """
    Join the text parts of the first candidate.
    Raises UpstreamError when the answer is empty, blocked or not shaped like a Gemini reply.
    """
    if not isinstance(data, dict):
        raise UpstreamError("Malformed response")
    candidates = data.get("candidates") or []
    if not candidates:
        feedback = data.get("promptFeedback")
        reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        raise UpstreamError(f"Response blocked: {reason}" if reason else "No candidates in response")

    first = candidates[0] if isinstance(candidates, list) else None
    if not isinstance(first, dict):
        raise UpstreamError("Malformed response")
    content = first.get("content")
    parts = (content.get("parts") if isinstance(content, dict) else None) or []
    if not isinstance(parts, list):
        raise UpstreamError("Malformed response")
    text = "".join(str(p.get("text") or "") for p in parts if isinstance(p, dict)).strip()
    if not text:
        finish = first.get("finishReason")
        raise UpstreamError(f"Empty response (finishReason={finish})" if finish else "Empty response")
    return text

def _call_model(model: str, body: Dict[str, Any], api_key: str) -> str:
    url = f"{settings.gemini_endpoint.rstrip('/')}/models/{model}:generateContent"
    try:
        r = httpx.post(url, params={"key": api_key}, json=body, timeout=settings.request_timeout)
    except httpx.HTTPError as e:
        raise UpstreamError(f"{type(e).__name__}: {e}") from e
    if r.is_error:
        raise UpstreamError(_error_message(r))
    try:
        data = r.json()
    except ValueError:
        raise UpstreamError("Response was not JSON") from None
    return extract_text(data)

def generate_text(prompt: str, image: ImagePayload, models: Optional[List[str]] = None) -> str:
    api_key = settings.google_api_key
    if not api_key:
        raise ConfigurationError("API Key not configured")

    candidates = list(models if models is not None else settings.gemini_models)
    if not candidates:
        raise ConfigurationError("No Gemini models configured")

    body = _request_body(prompt, image)
    last_error: Optional[UpstreamError] = None

    for model in candidates:
        try:
            text = _call_model(model, body, api_key)
        except UpstreamError as e:
            logger.warning("Gemini model {} failed: {}", model, e.message)
            last_error = e
            continue
        logger.info("Gemini model {} answered ({} chars)", model, len(text))
        return text

    logger.error("All {} Gemini models failed; last error: {}", len(candidates), last_error.message)
    raise UpstreamError(last_error.message)
