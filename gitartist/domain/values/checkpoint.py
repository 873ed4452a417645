"""Undo checkpoint value objects.

A checkpoint is either ``NoHistoryYet`` (the repository had no commits when it
was captured) or ``CheckpointAt`` a specific commit.
"""

import re
from dataclasses import dataclass

# Persisted marker for a repository without history
INITIAL_SENTINEL = "initial"

# Abbreviated or full SHA-1/SHA-256 object name
_COMMIT_ID = re.compile(r"[0-9a-f]{4,64}")


@dataclass(frozen=True, slots=True)
class NoHistoryYet:
    """Checkpoint captured before the first commit existed."""

    def serialize(self) -> str:
        return INITIAL_SENTINEL


@dataclass(frozen=True, slots=True)
class CheckpointAt:
    """Checkpoint pointing at a known-good commit."""

    commit_id: str

    def __post_init__(self) -> None:
        if not self.commit_id:
            raise ValueError("Checkpoint commit id cannot be empty")
        if not _COMMIT_ID.fullmatch(self.commit_id):
            raise ValueError(f"Not a commit hash: {self.commit_id!r}")

    @property
    def short_id(self) -> str:
        return self.commit_id[:7]

    def serialize(self) -> str:
        return self.commit_id


UndoCheckpoint = NoHistoryYet | CheckpointAt


def parse_checkpoint(raw: str) -> UndoCheckpoint:
    """Parse a persisted checkpoint value."""
    value = raw.strip()
    if value == INITIAL_SENTINEL:
        return NoHistoryYet()
    return CheckpointAt(value)
