"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps endpoints, model fallback order and output sizing tunable without code changes.
"""

from typing import Dict, List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    # CORS (the camera page may be served from anywhere)
    cors_allow_origins: List[str] = Field(default=["*"], description="Allowed origins for browser apps")

    # One key serves both Gemini and Cloud Vision.
    # GOOGLE_API_KEY preferred; VITE_GOOGLE_API_KEY kept for older deployments.
    google_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "VITE_GOOGLE_API_KEY", "google_api_key"),
    )

    # ---- Gemini (generative) ----
    gemini_endpoint: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    # Tried in order; first model that answers wins
    gemini_models: List[str] = Field(
        default=[
            "gemini-1.5-flash-latest",
            "gemini-1.5-flash",
            "gemini-2.0-flash",
            "gemini-2.5-flash",
        ],
        description="Model fallback order for generateContent",
    )

    # ---- Cloud Vision (annotation) ----
    vision_endpoint: str = Field(default="https://vision.googleapis.com/v1/images:annotate")
    label_max_results: int = Field(default=10)
    face_max_results: int = Field(default=10)

    # Outbound HTTP
    request_timeout: float = Field(default=30.0, description="Seconds per upstream call")

    # ---- Payload / response sizing ----
    max_image_bytes: int = Field(default=10 * 1024 * 1024, description="Decoded image size cap")
    label_limit: int = Field(default=5)           # labels shown in the result
    text_char_limit: int = Field(default=100)     # OCR text is cut to this length

    # Phrase replacements applied to celebrity answers (matched case-insensitively)
    result_aliases: Dict[str, str] = Field(default={"DONALD TRUMP": "ORANGE CROWN"})

    # ---- Logging ----
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False, description="Serialize log records as JSON lines")

settings = Settings()
