"""Domain value objects - immutable data structures."""

from .author import AuthorIdentity
from .checkpoint import (
    INITIAL_SENTINEL,
    CheckpointAt,
    NoHistoryYet,
    UndoCheckpoint,
    parse_checkpoint,
)
from .commit_plan import PINNED_TIME, CommitOperation, CommitPlanEntry
from .density import DENSITY_TABLE, FALLBACK_DENSITY, DensityRange, range_for
from .pixel import DAYS_PER_WEEK, MAX_DENSITY, MIN_DENSITY, Pixel

__all__ = [
    "Pixel",
    "DAYS_PER_WEEK",
    "MIN_DENSITY",
    "MAX_DENSITY",
    "AuthorIdentity",
    "DensityRange",
    "DENSITY_TABLE",
    "FALLBACK_DENSITY",
    "range_for",
    "CommitPlanEntry",
    "CommitOperation",
    "PINNED_TIME",
    "NoHistoryYet",
    "CheckpointAt",
    "UndoCheckpoint",
    "INITIAL_SENTINEL",
    "parse_checkpoint",
]
