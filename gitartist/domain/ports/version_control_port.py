"""Version control port - interface for repository operations."""

from datetime import datetime
from typing import Protocol

from ..values import AuthorIdentity


class VersionControlPort(Protocol):
    """Protocol for the local repository the drawing is committed to.

    Implementations raise ``GitOperationError`` when a command fails.
    """

    @property
    def path(self) -> str:
        """Working tree root."""
        ...

    def write_file(self, relative_path: str, content: str) -> None:
        """Overwrite a file in the working tree."""
        ...

    def add(self, relative_path: str) -> None:
        """Stage a file."""
        ...

    def commit(self, message: str, when: datetime, author: AuthorIdentity | None = None) -> str:
        """Commit the index with author and committer dates pinned to ``when``.

        Returns:
            The new commit hash.
        """
        ...

    def head_commit(self) -> str | None:
        """Hash of the current tip, or None if there are no commits."""
        ...

    def commit_count(self) -> int:
        """Number of commits reachable from HEAD."""
        ...

    def current_branch(self) -> str:
        """Name of the checked out branch."""
        ...

    def reset_hard(self, ref: str) -> None:
        """Hard reset the current branch to ``ref``."""
        ...

    def push(self, remote: str, branch: str, force: bool = False) -> None:
        """Push a branch to a remote, setting upstream."""
        ...

    def branch_exists(self, name: str) -> bool:
        ...

    def delete_branch(self, name: str) -> None:
        ...

    def rename_branch(self, new_name: str) -> None:
        """Rename the current branch."""
        ...

    def checkout_orphan(self, name: str) -> None:
        """Switch to a new branch without parents."""
        ...

    def checkout(self, name: str, force: bool = False) -> None:
        """Switch to an existing branch, discarding local changes when forced."""
        ...

    def add_remote(self, name: str, url: str) -> None:
        ...
