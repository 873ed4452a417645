"""Version control adapter on GitPython."""

import logging
from datetime import datetime
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from gitartist.domain import AuthorIdentity, GitOperationError

logger = logging.getLogger(__name__)

# Seconds before a hanging push is killed
PUSH_TIMEOUT = 120


class GitPythonRepository:
    """Implements VersionControlPort by driving the git CLI through GitPython."""

    def __init__(self, repo: Repo) -> None:
        self._repo = repo

    @classmethod
    def open(cls, path: Path | str) -> "GitPythonRepository":
        """Open an existing working tree.

        Raises:
            GitOperationError: The path is not a git repository.
        """
        try:
            return cls(Repo(path))
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise GitOperationError(
                f"{path} is not a git repository.",
                hint="Run this inside a local repository that is linked to GitHub.",
            ) from e

    @classmethod
    def init(cls, path: Path | str, initial_branch: str = "main") -> "GitPythonRepository":
        """Create a new working tree with its first branch named ``initial_branch``."""
        return cls(Repo.init(path, initial_branch=initial_branch))

    @property
    def path(self) -> str:
        return str(self._repo.working_tree_dir)

    @property
    def git_dir(self) -> Path:
        return Path(self._repo.git_dir)

    def write_file(self, relative_path: str, content: str) -> None:
        (Path(self.path) / relative_path).write_text(content, encoding="utf-8")

    def add(self, relative_path: str) -> None:
        self._run("add", relative_path)

    def commit(self, message: str, when: datetime, author: AuthorIdentity | None = None) -> str:
        stamp = when.isoformat()
        env = {"GIT_AUTHOR_DATE": stamp, "GIT_COMMITTER_DATE": stamp}
        if author is not None:
            env.update(
                {
                    "GIT_AUTHOR_NAME": author.name,
                    "GIT_AUTHOR_EMAIL": author.email,
                    "GIT_COMMITTER_NAME": author.name,
                    "GIT_COMMITTER_EMAIL": author.email,
                }
            )
        self._run("commit", "--no-verify", "-m", message, env=env)
        return self._repo.head.commit.hexsha

    def head_commit(self) -> str | None:
        if not self._repo.head.is_valid():
            return None
        return self._repo.head.commit.hexsha

    def commit_count(self) -> int:
        if not self._repo.head.is_valid():
            return 0
        return int(self._run("rev-list", "--count", "HEAD"))

    def current_branch(self) -> str:
        return self._run("rev-parse", "--abbrev-ref", "HEAD")

    def reset_hard(self, ref: str) -> None:
        self._run("reset", "--hard", ref)

    def push(self, remote: str, branch: str, force: bool = False) -> None:
        args = ["-u", remote, branch]
        if force:
            args.append("--force")
        logger.info("Pushing %s to %s force=%s", branch, remote, force)
        self._run("push", *args, kill_after_timeout=PUSH_TIMEOUT)

    def branch_exists(self, name: str) -> bool:
        return name in {head.name for head in self._repo.heads}

    def delete_branch(self, name: str) -> None:
        self._run("branch", "-D", name)

    def rename_branch(self, new_name: str) -> None:
        self._run("branch", "-M", new_name)

    def checkout_orphan(self, name: str) -> None:
        self._run("checkout", "--orphan", name)

    def checkout(self, name: str, force: bool = False) -> None:
        args = ["--force", name] if force else [name]
        self._run("checkout", *args)

    def add_remote(self, name: str, url: str) -> None:
        self._repo.create_remote(name, url)

    def _run(self, command: str, *args: str, **kwargs) -> str:
        try:
            return getattr(self._repo.git, command.replace("-", "_"))(*args, **kwargs)
        except GitCommandError as e:
            stderr = (e.stderr or "").strip()
            raise GitOperationError(f"git {command} failed: {stderr or e}") from e
