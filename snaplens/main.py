"""
Purpose:
- FastAPI application factory and router mounts.
- CORS open to any origin by default (browser camera page calls us directly).
- Every error leaves as {"error": "..."}; the client only reads result/error.
- Uvicorn will serve this on settings.host:settings.port.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.errors import SnapLensError
from .core.logging import configure_logging
from .core.settings import settings
from .api.analyze import router as analyze_router
from .api.health import router as health_router

def _error(status: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message}, headers=headers)

async def _snaplens_error(request: Request, exc: SnapLensError):
    if exc.status_code >= 500:
        logger.error("{} {} -> {}: {}", request.method, request.url.path, type(exc).__name__, exc.message)
    else:
        logger.info("{} {} rejected: {}", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)

async def _http_error(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

async def _validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request")
    return _error(422, f"{loc}: {msg}" if loc else msg)

async def _unhandled_error(request: Request, exc: Exception):
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return _error(500, "Internal Server Error")

def create_app() -> FastAPI:
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(title="SnapLens API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SnapLensError, _snaplens_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(health_router)
    app.include_router(analyze_router)

    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set; /api/analyze will answer 500 until it is")
    return app

app = create_app()

def run() -> None:
    import uvicorn
    uvicorn.run("snaplens.main:app", host=settings.host, port=settings.port, log_config=None)
