"""Undo service - single checkpoint rollback."""

import logging

from gitartist.domain import (
    CheckpointAt,
    CheckpointStorePort,
    NoHistoryYet,
    NothingToUndoError,
    UndoCheckpoint,
    VersionControlPort,
)

logger = logging.getLogger(__name__)


class UndoService:
    """Capture and restore the one checkpoint kept per repository."""

    def __init__(
        self,
        repository: VersionControlPort,
        store: CheckpointStorePort,
        remote: str = "origin",
    ) -> None:
        self._repository = repository
        self._store = store
        self._remote = remote

    def checkpoint(self) -> UndoCheckpoint:
        """Record the current tip, replacing any previous checkpoint."""
        head = self._repository.head_commit()
        checkpoint: UndoCheckpoint = CheckpointAt(head) if head else NoHistoryYet()
        self._store.save(checkpoint)
        logger.info("Undo checkpoint saved: %s", checkpoint.serialize())
        return checkpoint

    def peek(self) -> UndoCheckpoint | None:
        return self._store.load()

    def undo(self) -> str:
        """Reset to the saved checkpoint and force-push.

        The checkpoint is consumed; it is kept if the reset or push fails.

        Returns:
            The commit id the branch now points at.

        Raises:
            NothingToUndoError: No checkpoint, or it predates all history.
            GitOperationError: Reset or push failed.
        """
        checkpoint = self._store.load()
        if checkpoint is None:
            raise NothingToUndoError("There is no saved undo point for this repository.")
        if isinstance(checkpoint, NoHistoryYet):
            raise NothingToUndoError("This was the first action; nothing to undo.")

        logger.info("Resetting to %s", checkpoint.short_id)
        self._repository.reset_hard(checkpoint.commit_id)
        branch = self._repository.current_branch()
        self._repository.push(self._remote, branch, force=True)
        self._store.delete()
        return checkpoint.commit_id
