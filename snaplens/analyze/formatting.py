"""
Purpose:
- Turn provider output into the short upper-case text the camera UI displays.
- One formatter per Vision mode; anything unrecognised reads "NO DATA FOUND".
"""

from __future__ import annotations
import re
from typing import Any, Dict, List, Mapping
from .modes import Mode

NO_DATA = "NO DATA FOUND"

_STRONG = {"LIKELY", "VERY_LIKELY"}

# likelihood field -> emotion word, in output order
FACE_EMOTIONS = [
    ("joyLikelihood", "HAPPY"),
    ("sorrowLikelihood", "SAD"),
    ("angerLikelihood", "ANGRY"),
    ("surpriseLikelihood", "SURPRISED"),
]

def format_generated(text: str) -> str:
    return (text or "").strip().upper()

def apply_aliases(text: str, aliases: Mapping[str, str]) -> str:
    for phrase, alias in aliases.items():
        if phrase:
            text = re.sub(re.escape(phrase), alias, text, flags=re.IGNORECASE)
    return text

def format_labels(annotations: List[Dict[str, Any]], limit: int = 5) -> str:
    return "\n".join((a.get("description") or "").upper() for a in annotations[:limit])

def format_text(annotations: List[Dict[str, Any]], char_limit: int = 100) -> str:
    # textAnnotations[0] is the full detected block; the rest are single words
    return (annotations[0].get("description") or "").upper()[:char_limit]

def describe_face(face: Dict[str, Any]) -> str:
    emotions = [word for field, word in FACE_EMOTIONS if face.get(field) in _STRONG]
    return " ".join(emotions) if emotions else "NEUTRAL"

def format_faces(faces: List[Dict[str, Any]]) -> str:
    return "\n".join(describe_face(f) for f in faces)

def format_annotation(mode: Mode, res: Dict[str, Any], label_limit: int = 5, text_char_limit: int = 100) -> str:
    if mode is Mode.LABELS and res.get("labelAnnotations"):
        return format_labels(res["labelAnnotations"], label_limit)
    if mode is Mode.TEXT and res.get("textAnnotations"):
        return format_text(res["textAnnotations"], text_char_limit)
    if mode is Mode.FACES and res.get("faceAnnotations"):
        return format_faces(res["faceAnnotations"])
    return NO_DATA
