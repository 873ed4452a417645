"""Repository service - create and register art repositories."""

import logging
from collections.abc import Callable
from pathlib import Path

from gitartist.domain import (
    RemoteHostPort,
    RepositorySetupError,
    SavedRepository,
    SavedRepositoryStorePort,
    VersionControlPort,
)

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Pixel art for my contribution graph, created with git-artist."


class RepositoryService:
    """Create a hosted repository, initialize it locally and remember it."""

    def __init__(
        self,
        remote_host: RemoteHostPort,
        store: SavedRepositoryStorePort,
        init_repository: Callable[[Path], VersionControlPort],
        remote: str = "origin",
        push_url: Callable[[str], str] | None = None,
    ) -> None:
        self._remote_host = remote_host
        self._store = store
        self._init_repository = init_repository
        self._remote = remote
        self._push_url = push_url or (lambda url: url)

    def create_and_setup(
        self,
        name: str,
        private: bool,
        parent_dir: Path,
        description: str = DEFAULT_DESCRIPTION,
    ) -> SavedRepository:
        """Create the remote repository and a linked local working tree.

        Raises:
            RemoteHostError: Creation on the host failed.
            RepositorySetupError: The local directory already exists.
        """
        local_path = Path(parent_dir) / name
        if local_path.exists():
            raise RepositorySetupError(f'A directory named "{name}" already exists in {parent_dir}.')

        clone_url = self._remote_host.create_repository(name, private, description)
        logger.info("Created remote repository %s", clone_url)

        local_path.mkdir(parents=True)
        repository = self._init_repository(local_path)
        repository.add_remote(self._remote, self._push_url(clone_url))

        # The record keeps the plain URL, never the credentialed one
        record = SavedRepository(name=name, local_path=str(local_path), remote_url=clone_url)
        self._store.add(record)
        return record
