"""History reset service - replace all history with one fresh commit."""

import json
import logging
from datetime import UTC, datetime

from gitartist.domain import AuthorIdentity, GitOperationError, VersionControlPort

logger = logging.getLogger(__name__)

DEFAULT_RESET_BRANCH = "git-artist-reset"
DEFAULT_PRIMARY_BRANCH = "main"


class HistoryResetService:
    """Irreversibly wipe a repository's history.

    Builds an orphan branch with a single marker commit, drops the old
    branch, renames the orphan to the primary branch and force-pushes.
    """

    def __init__(
        self,
        repository: VersionControlPort,
        data_file: str = "data.json",
        remote: str = "origin",
        primary_branch: str = DEFAULT_PRIMARY_BRANCH,
        temp_branch: str = DEFAULT_RESET_BRANCH,
    ) -> None:
        self._repository = repository
        self._data_file = data_file
        self._remote = remote
        self._primary_branch = primary_branch
        self._temp_branch = temp_branch

    def reset(self, author: AuthorIdentity | None = None, now: datetime | None = None) -> str:
        """Wipe history and push the single-commit branch.

        Returns:
            Name of the primary branch.

        Raises:
            GitOperationError: A git step failed. When the marker commit
                fails the repository is switched back to the branch it
                was on and the temporary branch is removed.
        """
        repo = self._repository
        now = now or datetime.now(UTC)

        # Leftover from an interrupted reset
        if repo.branch_exists(self._temp_branch):
            repo.delete_branch(self._temp_branch)

        try:
            old_branch = repo.current_branch()
        except GitOperationError:
            old_branch = self._primary_branch

        repo.checkout_orphan(self._temp_branch)
        try:
            repo.write_file(self._data_file, json.dumps({"reset": now.isoformat()}))
            repo.add(self._data_file)
            repo.commit("chore: repository reset", now, author)
        except (GitOperationError, OSError):
            self._restore(old_branch)
            raise

        if old_branch and old_branch != self._temp_branch and repo.branch_exists(old_branch):
            repo.delete_branch(old_branch)
        if self._primary_branch != old_branch and repo.branch_exists(self._primary_branch):
            repo.delete_branch(self._primary_branch)

        repo.rename_branch(self._primary_branch)
        repo.push(self._remote, self._primary_branch, force=True)
        logger.info("History wiped, %s now has a single commit", self._primary_branch)
        return self._primary_branch

    def _restore(self, old_branch: str) -> None:
        """Return to the branch a failed reset started from."""
        repo = self._repository
        if not repo.branch_exists(old_branch):
            logger.warning("Reset failed and %s has no commits to return to", old_branch)
            return
        try:
            repo.checkout(old_branch, force=True)
            if repo.branch_exists(self._temp_branch):
                repo.delete_branch(self._temp_branch)
        except GitOperationError as e:
            logger.error("Could not return to %s after a failed reset: %s", old_branch, e)
        else:
            logger.info("Reset failed, back on %s", old_branch)
