"""Render text into calendar pixels."""

from ..entities import Drawing
from ..values import MAX_DENSITY, Pixel
from .font import GLYPHS, UNKNOWN_GLYPH

# Blank columns between glyphs
LETTER_SPACING = 1


class TextRenderer:
    """Render text column by column using the built-in bitmap font."""

    def __init__(
        self,
        glyphs: dict[str, tuple[str, ...]] | None = None,
        density: int = MAX_DENSITY,
    ) -> None:
        self._glyphs = glyphs or GLYPHS
        self._density = density

    def render(self, text: str) -> Drawing:
        """Render text to a drawing starting at week 0.

        Text is upper-cased; unknown characters render as a space.
        """
        pixels: list[Pixel] = []
        week = 0
        for char in text.upper():
            glyph = self._glyphs.get(char) or self._glyphs[UNKNOWN_GLYPH]
            width = len(glyph[0])
            for col in range(width):
                for day, row in enumerate(glyph):
                    if row[col] == "#":
                        pixels.append(Pixel(week + col, day, self._density))
            week += width + LETTER_SPACING
        return Drawing.of(pixels)
