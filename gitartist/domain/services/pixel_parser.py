"""Validation of pixel data from untrusted sources."""

import json
import logging
from pathlib import Path
from typing import Any

from ..entities import Drawing
from ..errors import TemplateError
from ..values import DAYS_PER_WEEK, MAX_DENSITY, MIN_DENSITY, Pixel

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_entry(entry: Any) -> Pixel | None:
    if not isinstance(entry, list | tuple) or len(entry) != 3:
        return None
    week, day, density = entry
    if not (_is_int(week) and _is_int(day) and _is_int(density)):
        return None
    if week < 0 or not 0 <= day < DAYS_PER_WEEK:
        return None
    if not MIN_DENSITY <= density <= MAX_DENSITY:
        return None
    return Pixel(week, day, density)


def parse_pixels(raw: Any) -> Drawing:
    """Validate a raw ``[[week, day, density], ...]`` payload.

    Malformed entries are dropped; a payload that is not a list yields an
    empty drawing. Order of the valid entries is preserved.
    """
    if not isinstance(raw, list):
        return Drawing()

    pixels = []
    dropped = 0
    for entry in raw:
        pixel = _parse_entry(entry)
        if pixel is None:
            dropped += 1
            continue
        pixels.append(pixel)

    if dropped:
        logger.warning("Dropped %d malformed pixel entries", dropped)
    return Drawing.of(pixels)


def load_pixels_from_file(path: Path | str) -> Drawing:
    """Load a JSON template file with a ``pixels`` list.

    Raises:
        TemplateError: If the file is missing, not JSON, or has no pixel list.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise TemplateError(f"File not found at path: {path}") from None
    except json.JSONDecodeError as e:
        raise TemplateError(f"Invalid JSON in file: {path} ({e.msg})") from e

    if not isinstance(data, dict) or not isinstance(data.get("pixels"), list):
        raise TemplateError(
            'Invalid template format: the JSON file must have a "pixels" key containing an array.'
        )
    return parse_pixels(data["pixels"])
