"""Checkpoint store backed by a file inside the git directory."""

import logging
from pathlib import Path

from gitartist.domain import UndoCheckpoint, parse_checkpoint

logger = logging.getLogger(__name__)

CHECKPOINT_FILE_NAME = "undo_commit_hash.txt"


class FileCheckpointStore:
    """Keep the checkpoint in ``<git dir>/undo_commit_hash.txt``.

    Living under ``.git`` keeps it out of the working tree and scoped to
    one repository.
    """

    def __init__(self, git_dir: Path | str) -> None:
        self._path = Path(git_dir) / CHECKPOINT_FILE_NAME

    @property
    def path(self) -> Path:
        return self._path

    def save(self, checkpoint: UndoCheckpoint) -> None:
        self._path.write_text(checkpoint.serialize(), encoding="utf-8")

    def load(self) -> UndoCheckpoint | None:
        if not self._path.exists():
            return None
        raw = self._path.read_text(encoding="utf-8")
        try:
            return parse_checkpoint(raw)
        except ValueError:
            logger.warning("Ignoring corrupt checkpoint file %s", self._path)
            return None

    def delete(self) -> None:
        self._path.unlink(missing_ok=True)
