"""Pixel value object."""

from dataclasses import dataclass

# Calendar grid rules
DAYS_PER_WEEK = 7
MIN_DENSITY = 1
MAX_DENSITY = 4


@dataclass(frozen=True, slots=True)
class Pixel:
    """One calendar cell: week column, day row (0=Sunday) and density level.

    Density is not range-checked here; translation falls back for unknown
    levels. Use ``parse_pixels`` for untrusted input.
    """

    week: int
    day: int
    density: int

    def __post_init__(self) -> None:
        if self.week < 0:
            raise ValueError("Week offset must be non-negative")
        if not 0 <= self.day < DAYS_PER_WEEK:
            raise ValueError(f"Day must be between 0 and {DAYS_PER_WEEK - 1}")

    def shifted(self, weeks: int) -> "Pixel":
        """Return a copy moved right by the given number of weeks."""
        return Pixel(self.week + weeks, self.day, self.density)
