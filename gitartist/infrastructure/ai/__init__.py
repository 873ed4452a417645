"""Generative AI infrastructure."""

from .gemini_generator import (
    DEFAULT_MODEL,
    GEMINI_API_URL,
    GeminiPatternGenerator,
    TriageResponse,
    extract_json_object,
)

__all__ = [
    "GeminiPatternGenerator",
    "TriageResponse",
    "extract_json_object",
    "DEFAULT_MODEL",
    "GEMINI_API_URL",
]
