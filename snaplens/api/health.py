# Environment/ops probe: library versions, key presence, provider config.
# Never echoes the key itself.

from fastapi import APIRouter
from ..core.settings import settings
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except Exception:
        return "not-installed"

@router.get("/healthz")
def healthz():
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic_settings": _ver("pydantic_settings"),
            "httpx": _ver("httpx"),
            "PIL": _ver("PIL"),
            "loguru": _ver("loguru"),
        },
        "config": {
            "gemini_endpoint": settings.gemini_endpoint,
            "gemini_models": list(settings.gemini_models),
            "vision_endpoint": settings.vision_endpoint,
            "request_timeout": settings.request_timeout,
            "max_image_bytes": settings.max_image_bytes,
        },
        "env_keys_present": {
            "GOOGLE_API_KEY": bool(settings.google_api_key),
        },
    }
