"""Infrastructure repositories - data storage implementations."""

from .file_checkpoint_store import CHECKPOINT_FILE_NAME, FileCheckpointStore
from .json_saved_repositories import JSONSavedRepositoryStore

__all__ = [
    "FileCheckpointStore",
    "CHECKPOINT_FILE_NAME",
    "JSONSavedRepositoryStore",
]
