"""Drawing entity - an ordered collection of pixels."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..values import DAYS_PER_WEEK, Pixel


@dataclass(frozen=True)
class Drawing:
    """Pixels in the order they were produced.

    Order is significant: the commit pipeline replays pixels exactly in this
    order. Duplicate cells are kept.
    """

    pixels: tuple[Pixel, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, pixels: Iterable[Pixel]) -> "Drawing":
        return cls(tuple(pixels))

    @classmethod
    def from_triples(cls, triples: Iterable[Iterable[int]]) -> "Drawing":
        """Build from trusted (week, day, density) triples."""
        return cls(tuple(Pixel(*triple) for triple in triples))

    @property
    def is_empty(self) -> bool:
        return not self.pixels

    @property
    def width(self) -> int:
        """Number of week columns spanned, starting at week 0."""
        if not self.pixels:
            return 0
        return max(p.week for p in self.pixels) + 1

    def shifted(self, weeks: int) -> "Drawing":
        """Move every pixel right by ``weeks`` columns."""
        return Drawing(tuple(p.shifted(weeks) for p in self.pixels))

    def as_grid(self) -> list[list[int]]:
        """Render to a day-major density matrix (7 rows x width columns)."""
        grid = [[0] * self.width for _ in range(DAYS_PER_WEEK)]
        for p in self.pixels:
            grid[p.day][p.week] = p.density
        return grid

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    def __len__(self) -> int:
        return len(self.pixels)
