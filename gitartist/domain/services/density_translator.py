"""Commit density translation."""

import random
from datetime import date

from ..values import CommitOperation, range_for


class CommitDensityTranslator:
    """Expand a (date, density) cell into individual commit operations.

    Counts are drawn uniformly from the density's range, so the same plan
    produces different totals on every run. Pass a seeded ``random.Random``
    for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def commit_count(self, density: int) -> int:
        bounds = range_for(density)
        return self._rng.randint(bounds.min_commits, bounds.max_commits)

    def expand(self, day: date, density: int) -> list[CommitOperation]:
        """Create the ordered commit operations for one calendar cell."""
        count = self.commit_count(density)
        return [
            CommitOperation(date=day, index=i + 1, nonce=self._rng.random())
            for i in range(count)
        ]
