"""
Purpose:
- POST /api/analyze: the one call the camera page makes.
- GET /api/modes: mode list in the client's cycle order.

Errors raised below are rendered as {"error": ...} by the handlers in main.py.
"""

from fastapi import APIRouter
from ..analyze.modes import DEFAULT_MODE, MODE_CYCLE, next_mode, provider_for
from ..analyze.schema import AnalyzeRequest, AnalyzeResponse, ErrorResponse, ModeInfo, ModesResponse
from ..analyze.service import analyze

router = APIRouter(prefix="/api", tags=["analyze"])

@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze_image(payload: AnalyzeRequest):
    # sync handler: FastAPI runs it in the threadpool, so blocking httpx is fine
    return AnalyzeResponse(result=analyze(payload.base64_image, payload.mode))

@router.get("/modes", response_model=ModesResponse)
def list_modes():
    return ModesResponse(
        default=DEFAULT_MODE.value,
        modes=[
            ModeInfo(name=m.value, provider=provider_for(m), next=next_mode(m).value)
            for m in MODE_CYCLE
        ],
    )
