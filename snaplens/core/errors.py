"""
Purpose:
- Exceptions raised by the analyze path, each carrying the HTTP status it maps to.
- main.py renders all of them as {"error": message}.
"""

from __future__ import annotations

class SnapLensError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class InvalidImageError(SnapLensError):
    status_code = 400

class UnsupportedModeError(SnapLensError):
    status_code = 400

class ConfigurationError(SnapLensError):
    status_code = 500

class UpstreamError(SnapLensError):
    """A provider call failed (all Gemini models, or Vision returned nothing)."""
    status_code = 500
