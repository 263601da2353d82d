"""
Purpose:
- Pydantic models for /api/analyze in/out so the API is self-documenting and stable.
- Field names follow the browser client's JSON (base64Image).
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base64_image: str = Field(..., alias="base64Image", description="JPEG/PNG bytes, base64 (data URL prefix allowed)")
    mode: Optional[str] = Field(default="gemini", description="One of the modes listed by /api/modes")

class AnalyzeResponse(BaseModel):
    result: str

class ErrorResponse(BaseModel):
    error: str

class ModeInfo(BaseModel):
    name: str
    provider: str
    next: str

class ModesResponse(BaseModel):
    default: str
    modes: List[ModeInfo] = []
