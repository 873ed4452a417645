"""Saved repository store port."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SavedRepository:
    """A repository previously created by the tool."""

    name: str
    local_path: str
    remote_url: str


class SavedRepositoryStorePort(Protocol):
    """Protocol for the list of saved repositories."""

    def list(self) -> list[SavedRepository]:
        ...

    def add(self, repository: SavedRepository) -> bool:
        """Append unless a record with the same local path exists.

        Returns:
            True if the record was added.
        """
        ...
