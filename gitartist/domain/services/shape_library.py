"""Library of named pixel-art shapes."""

from ..entities import Drawing
from ..values import Pixel

# Day-major density grids: one row per weekday, one column per week
SHAPES: dict[str, list[list[int]]] = {
    "heart": [
        [0, 2, 2, 0, 2, 2, 0],
        [2, 4, 4, 2, 4, 4, 2],
        [4, 4, 4, 4, 4, 4, 4],
        [4, 4, 4, 4, 4, 4, 4],
        [2, 4, 4, 4, 4, 4, 2],
        [0, 2, 4, 4, 4, 2, 0],
        [0, 0, 2, 2, 2, 0, 0],
    ],
    "star": [
        [0, 0, 0, 4, 0, 0, 0],
        [0, 0, 3, 4, 3, 0, 0],
        [4, 4, 4, 4, 4, 4, 4],
        [0, 3, 4, 4, 4, 3, 0],
        [0, 0, 4, 3, 4, 0, 0],
        [0, 4, 3, 0, 3, 4, 0],
        [4, 2, 0, 0, 0, 2, 4],
    ],
    "smile": [
        [0, 0, 2, 2, 2, 2, 0, 0],
        [0, 2, 0, 0, 0, 0, 2, 0],
        [2, 0, 4, 0, 0, 4, 0, 2],
        [2, 0, 0, 0, 0, 0, 0, 2],
        [2, 0, 4, 0, 0, 4, 0, 2],
        [0, 2, 0, 4, 4, 0, 2, 0],
        [0, 0, 2, 2, 2, 2, 0, 0],
    ],
    "diamond": [
        [0, 0, 0, 2, 0, 0, 0],
        [0, 0, 2, 4, 2, 0, 0],
        [0, 2, 4, 4, 4, 2, 0],
        [2, 4, 4, 4, 4, 4, 2],
        [0, 2, 4, 4, 4, 2, 0],
        [0, 0, 2, 4, 2, 0, 0],
        [0, 0, 0, 2, 0, 0, 0],
    ],
    "skull": [
        [0, 0, 2, 2, 2, 2, 0, 0],
        [0, 2, 4, 2, 2, 4, 2, 0],
        [2, 4, 4, 2, 2, 4, 4, 2],
        [2, 2, 2, 4, 4, 2, 2, 2],
        [2, 4, 2, 2, 2, 2, 4, 2],
        [0, 2, 4, 4, 4, 4, 2, 0],
        [0, 0, 2, 2, 2, 2, 0, 0],
    ],
    "arrow": [
        [0, 0, 0, 0, 0, 4, 0, 0],
        [0, 0, 0, 0, 0, 4, 4, 0],
        [3, 3, 3, 3, 3, 4, 4, 4],
        [3, 3, 3, 3, 3, 4, 4, 4],
        [3, 3, 3, 3, 3, 4, 4, 4],
        [0, 0, 0, 0, 0, 4, 4, 0],
        [0, 0, 0, 0, 0, 4, 0, 0],
    ],
    "space_invader": [
        [0, 0, 4, 0, 0, 0, 0, 0, 4, 0, 0],
        [0, 0, 0, 4, 0, 0, 0, 4, 0, 0, 0],
        [0, 0, 4, 4, 4, 4, 4, 4, 4, 0, 0],
        [0, 4, 4, 1, 4, 4, 4, 1, 4, 4, 0],
        [4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4],
        [4, 0, 4, 4, 4, 4, 4, 4, 4, 0, 4],
        [4, 0, 4, 0, 0, 0, 0, 0, 4, 0, 4],
    ],
    "wave": [
        [4, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 0],
        [3, 4, 0, 0, 0, 4, 3, 4, 0, 0, 0, 4],
        [2, 3, 4, 0, 4, 3, 2, 3, 4, 0, 4, 3],
        [1, 2, 3, 4, 3, 2, 1, 2, 3, 4, 3, 2],
        [1, 1, 2, 3, 2, 1, 1, 1, 2, 3, 2, 1],
        [1, 1, 1, 2, 1, 1, 1, 1, 1, 2, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    ],
    "checker": [
        [4, 0, 4, 0, 4, 0, 4, 0],
        [0, 4, 0, 4, 0, 4, 0, 4],
        [4, 0, 4, 0, 4, 0, 4, 0],
        [0, 4, 0, 4, 0, 4, 0, 4],
        [4, 0, 4, 0, 4, 0, 4, 0],
        [0, 4, 0, 4, 0, 4, 0, 4],
        [4, 0, 4, 0, 4, 0, 4, 0],
    ],
}


class ShapeLibrary:
    """Lookup of pre-made shapes by name."""

    def __init__(self, shapes: dict[str, list[list[int]]] | None = None) -> None:
        self._shapes = shapes if shapes is not None else SHAPES

    def names(self) -> list[str]:
        return sorted(self._shapes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._shapes

    def get(self, name: str) -> Drawing:
        """Get a shape as a drawing; unknown names give an empty drawing.

        Pixels are emitted row by row (day-major), matching the grid layout.
        """
        grid = self._shapes.get(self._normalize(name))
        if grid is None:
            return Drawing()
        pixels = [
            Pixel(week, day, density)
            for day, row in enumerate(grid)
            for week, density in enumerate(row)
            if density > 0
        ]
        return Drawing.of(pixels)

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower().replace(" ", "_").replace("-", "_")
