"""Application services - use case implementations."""

from .commit_pipeline import CommitPipelineService, GenerationResult, build_plan
from .drawing_service import (
    INTENT_CUSTOM_SHAPE,
    INTENT_KNOWN_SHAPE,
    INTENT_TEXT,
    DrawingService,
)
from .history_reset import HistoryResetService
from .repository_service import RepositoryService
from .undo_service import UndoService

__all__ = [
    "CommitPipelineService",
    "GenerationResult",
    "build_plan",
    "UndoService",
    "HistoryResetService",
    "DrawingService",
    "INTENT_TEXT",
    "INTENT_KNOWN_SHAPE",
    "INTENT_CUSTOM_SHAPE",
    "RepositoryService",
]
