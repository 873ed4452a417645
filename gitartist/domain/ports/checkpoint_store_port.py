"""Checkpoint store port."""

from typing import Protocol

from ..values import UndoCheckpoint


class CheckpointStorePort(Protocol):
    """Persistence for the single undo checkpoint of one repository."""

    def save(self, checkpoint: UndoCheckpoint) -> None:
        """Persist, replacing any existing checkpoint."""
        ...

    def load(self) -> UndoCheckpoint | None:
        """Load the checkpoint, None if there is none."""
        ...

    def delete(self) -> None:
        ...
