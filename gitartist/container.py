"""Dependency container - holds all wired dependencies."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from gitartist.application.services import (
    CommitPipelineService,
    DrawingService,
    HistoryResetService,
    RepositoryService,
    UndoService,
)
from gitartist.config import Config
from gitartist.domain import SavedRepositoryStorePort, VersionControlPort


@dataclass(frozen=True)
class Workspace:
    """Services bound to one local repository."""

    path: Path
    repository: VersionControlPort
    pipeline: CommitPipelineService
    undo: UndoService
    history_reset: HistoryResetService


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    Per-repository services are created on demand through ``open_workspace``.
    """

    # Configuration
    config: Config

    # Services
    drawing_service: DrawingService

    # Repositories
    saved_repositories: SavedRepositoryStorePort

    # Factories
    workspace_factory: Callable[[Path], Workspace]

    # Only available when a GitHub token is configured
    repository_service: RepositoryService | None = None

    def open_workspace(self, path: Path | str) -> Workspace:
        """Bind repository services to a working tree."""
        return self.workspace_factory(Path(path))

    @property
    def can_create_repositories(self) -> bool:
        return self.repository_service is not None
