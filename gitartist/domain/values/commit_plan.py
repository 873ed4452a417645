"""Commit plan value objects."""

import json
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

# Commits are pinned to midday so the calendar cell survives any viewer timezone
PINNED_TIME = time(12, 0, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class CommitPlanEntry:
    """A calendar date and the density to paint it with."""

    date: date
    density: int


@dataclass(frozen=True, slots=True)
class CommitOperation:
    """A single commit to create on a pinned date.

    The payload only exists to give each commit a non-empty diff.
    """

    date: date
    index: int
    nonce: float

    @property
    def timestamp(self) -> datetime:
        return datetime.combine(self.date, PINNED_TIME)

    @property
    def message(self) -> str:
        return f"feat: auto-commit for {self.date.isoformat()}"

    def payload(self) -> str:
        return json.dumps({"date": self.date.isoformat(), "c": self.index, "r": self.nonce})
