"""Saved repository list stored as JSON."""

import json
import logging
from pathlib import Path

from gitartist.domain import SavedRepository

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORIES_FILE = Path.home() / ".config" / "git-artist" / "repositories.json"


class JSONSavedRepositoryStore:
    """Append-only list of repositories, deduplicated by local path."""

    def __init__(self, path: Path | str = DEFAULT_REPOSITORIES_FILE) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def list(self) -> list[SavedRepository]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s, it might be corrupted: %s", self._path, e)
            return []

        repositories = []
        for item in data if isinstance(data, list) else []:
            try:
                repositories.append(
                    SavedRepository(
                        name=item["name"],
                        local_path=item["localPath"],
                        remote_url=item["remoteUrl"],
                    )
                )
            except (KeyError, TypeError):
                continue
        return repositories

    def add(self, repository: SavedRepository) -> bool:
        repositories = self.list()
        if any(r.local_path == repository.local_path for r in repositories):
            return False

        repositories.append(repository)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(
                [
                    {"name": r.name, "localPath": r.local_path, "remoteUrl": r.remote_url}
                    for r in repositories
                ],
                indent=2,
            ),
            encoding="utf-8",
        )
        logger.info("Saved repository %s", repository.name)
        return True
