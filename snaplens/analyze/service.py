"""
Purpose:
- The analyze operation: image + mode in, display text out.
- Picks the provider by mode, calls it, formats the answer.
"""

from __future__ import annotations
from loguru import logger
from ..core.errors import ConfigurationError
from ..core.settings import settings
from ..clients.gemini import generate_text
from ..clients.vision import annotate
from .formatting import apply_aliases, format_annotation, format_generated
from .image import normalize_base64
from .modes import Mode, features_for, is_generative, parse_mode, prompt_for, provider_for

def analyze(base64_image: str, mode: str | None) -> str:
    if not settings.google_api_key:
        raise ConfigurationError("API Key not configured")

    m = parse_mode(mode)
    image = normalize_base64(base64_image, settings.max_image_bytes)
    logger.info("Analyze mode={} provider={} image={} {}x{} ({} bytes)",
                m.value, provider_for(m), image.mime_type, image.width, image.height, image.size)

    if is_generative(m):
        text = format_generated(generate_text(prompt_for(m), image))
        if m is Mode.CELEBRITY:
            text = apply_aliases(text, settings.result_aliases)
        return text

    res = annotate(image, features_for(m, settings))
    return format_annotation(
        m, res,
        label_limit=settings.label_limit,
        text_char_limit=settings.text_char_limit,
    )
