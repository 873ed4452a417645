"""Density level to commit-count ranges."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DensityRange:
    """Inclusive commit-count range for one density level."""

    min_commits: int
    max_commits: int

    def __post_init__(self) -> None:
        if self.min_commits < 1:
            raise ValueError("A density range must produce at least one commit")
        if self.max_commits < self.min_commits:
            raise ValueError("max_commits must be >= min_commits")

    def __contains__(self, count: object) -> bool:
        return isinstance(count, int) and self.min_commits <= count <= self.max_commits


DENSITY_TABLE: dict[int, DensityRange] = {
    1: DensityRange(1, 2),
    2: DensityRange(3, 5),
    3: DensityRange(6, 9),
    4: DensityRange(10, 15),
}

# Unknown levels are drawn like the lightest shade
FALLBACK_DENSITY = 1


def range_for(density: int) -> DensityRange:
    """Get the commit-count range for a density, falling back to level 1."""
    return DENSITY_TABLE.get(density, DENSITY_TABLE[FALLBACK_DENSITY])
