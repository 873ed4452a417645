"""Domain services - pure business logic operations."""

from .anchor import (
    CALENDAR_WEEKS,
    AnchorPolicy,
    normalize_to_sunday,
    parse_anchor_date,
    plan_date,
    resolve_anchor,
)
from .density_translator import CommitDensityTranslator
from .pixel_parser import load_pixels_from_file, parse_pixels
from .shape_library import SHAPES, ShapeLibrary
from .text_renderer import LETTER_SPACING, TextRenderer

__all__ = [
    "AnchorPolicy",
    "CALENDAR_WEEKS",
    "resolve_anchor",
    "normalize_to_sunday",
    "parse_anchor_date",
    "plan_date",
    "CommitDensityTranslator",
    "parse_pixels",
    "load_pixels_from_file",
    "ShapeLibrary",
    "SHAPES",
    "TextRenderer",
    "LETTER_SPACING",
]
