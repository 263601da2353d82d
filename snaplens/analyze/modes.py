"""
Purpose:
- The mode vocabulary: which provider handles a mode, and with what prompt or feature set.
- Cycle order matches the capture client's mode button.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional
from ..core.errors import UnsupportedModeError
from ..core.settings import Settings, settings as default_settings

class Mode(str, Enum):
    GEMINI = "gemini"
    CELEBRITY = "celebrity"
    MOOD = "mood"
    HAIKU = "haiku"
    LABELS = "labels"
    TEXT = "text"
    FACES = "faces"

DEFAULT_MODE = Mode.GEMINI

# Declaration order above is the cycle order
MODE_CYCLE: List[Mode] = list(Mode)

PROMPTS: Dict[Mode, str] = {
    Mode.GEMINI: "Describe this image in 10 words or less. Be direct and poetic. Reply in uppercase.",
    Mode.CELEBRITY: (
        "If there is a famous person in this image, tell me who they are. "
        "If not, describe who you see. Be brief, 10 words max. Reply in uppercase."
    ),
    Mode.MOOD: "Describe the mood or atmosphere of this image in 5 words or less. Reply in uppercase.",
    Mode.HAIKU: "Write a haiku about this image. Reply in uppercase.",
}

VISION_FEATURE_TYPES: Dict[Mode, str] = {
    Mode.LABELS: "LABEL_DETECTION",
    Mode.TEXT: "TEXT_DETECTION",
    Mode.FACES: "FACE_DETECTION",
}

def parse_mode(value: Optional[str]) -> Mode:
    cleaned = (value or "").strip().lower()
    if not cleaned:
        return DEFAULT_MODE
    try:
        return Mode(cleaned)
    except ValueError:
        raise UnsupportedModeError(f"Unsupported mode: {value}") from None

def is_generative(mode: Mode) -> bool:
    return mode in PROMPTS

def provider_for(mode: Mode) -> str:
    return "gemini" if is_generative(mode) else "vision"

def prompt_for(mode: Mode) -> str:
    try:
        return PROMPTS[mode]
    except KeyError:
        raise UnsupportedModeError(f"Mode {mode.value} has no prompt") from None

def features_for(mode: Mode, cfg: Settings = default_settings) -> List[Dict[str, object]]:
    """
    Vision feature list for an annotation mode.
    TEXT_DETECTION takes no maxResults; labels and faces are capped from settings.
    """
    if mode not in VISION_FEATURE_TYPES:
        raise UnsupportedModeError(f"Mode {mode.value} has no Vision features")
    feature: Dict[str, object] = {"type": VISION_FEATURE_TYPES[mode]}
    if mode is Mode.LABELS:
        feature["maxResults"] = cfg.label_max_results
    elif mode is Mode.FACES:
        feature["maxResults"] = cfg.face_max_results
    return [feature]

def next_mode(mode: Mode) -> Mode:
    idx = MODE_CYCLE.index(mode)
    return MODE_CYCLE[(idx + 1) % len(MODE_CYCLE)]
