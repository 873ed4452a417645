"""Shared test fixtures and configuration."""

import random
import shutil
from datetime import date, datetime

import pytest

from gitartist.domain import (
    AuthorIdentity,
    Drawing,
    DrawingIntent,
    GitOperationError,
    SavedRepository,
    UndoCheckpoint,
)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")

# ============= Domain Fixtures =============


@pytest.fixture
def author():
    """Sample commit author."""
    return AuthorIdentity("Ada Artist", "ada@example.com")


@pytest.fixture
def anchor():
    """A Sunday to anchor drawings on."""
    return date(2024, 1, 7)


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def small_drawing():
    """Three pixels, two of them on the same day."""
    return Drawing.from_triples([(0, 0, 1), (2, 3, 4), (0, 0, 2)])


# ============= Mock Fixtures =============


class FakeRepository:
    """In-memory VersionControlPort.

    Records every call in ``calls`` and keeps commit history per branch.
    """

    def __init__(self, path: str = "/tmp/fake-repo", branch: str = "main") -> None:
        self._path = path
        self._branch = branch
        self.branches: dict[str, list[str]] = {branch: []}
        self.files: dict[str, str] = {}
        self.staged: set[str] = set()
        self.commits: list[dict] = []
        self.calls: list[tuple] = []
        self.pushes: list[tuple[str, str, bool]] = []
        self.remotes: dict[str, str] = {}

        # Failure injection
        self.fail_commit_at: int | None = None
        self.fail_push = False
        self.fail_current_branch = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def history(self) -> list[str]:
        return self.branches.get(self._branch, [])

    def write_file(self, relative_path: str, content: str) -> None:
        self.calls.append(("write_file", relative_path))
        self.files[relative_path] = content

    def add(self, relative_path: str) -> None:
        self.calls.append(("add", relative_path))
        self.staged.add(relative_path)

    def commit(self, message: str, when: datetime, author: AuthorIdentity | None = None) -> str:
        self.calls.append(("commit", message))
        if self.fail_commit_at is not None and len(self.commits) == self.fail_commit_at:
            raise GitOperationError("git commit failed: simulated")
        commit_id = f"{len(self.commits) + 1:040x}"
        self.commits.append(
            {"id": commit_id, "message": message, "when": when, "author": author}
        )
        self.branches.setdefault(self._branch, []).append(commit_id)
        self.staged.clear()
        return commit_id

    def head_commit(self) -> str | None:
        history = self.history
        return history[-1] if history else None

    def commit_count(self) -> int:
        return len(self.history)

    def current_branch(self) -> str:
        self.calls.append(("current_branch",))
        if self.fail_current_branch:
            raise GitOperationError("git rev-parse failed: simulated")
        return self._branch

    def reset_hard(self, ref: str) -> None:
        self.calls.append(("reset_hard", ref))
        history = self.history
        if ref not in history:
            raise GitOperationError(f"git reset failed: unknown revision {ref}")
        self.branches[self._branch] = history[: history.index(ref) + 1]

    def push(self, remote: str, branch: str, force: bool = False) -> None:
        self.calls.append(("push", remote, branch, force))
        if self.fail_push:
            raise GitOperationError("git push failed: could not read from remote")
        self.pushes.append((remote, branch, force))

    def branch_exists(self, name: str) -> bool:
        return name in self.branches

    def delete_branch(self, name: str) -> None:
        self.calls.append(("delete_branch", name))
        del self.branches[name]

    def rename_branch(self, new_name: str) -> None:
        self.calls.append(("rename_branch", new_name))
        self.branches[new_name] = self.branches.pop(self._branch)
        self._branch = new_name

    def checkout_orphan(self, name: str) -> None:
        self.calls.append(("checkout_orphan", name))
        self._branch = name
        self.branches[name] = []

    def checkout(self, name: str, force: bool = False) -> None:
        self.calls.append(("checkout", name, force))
        self._branch = name

    def add_remote(self, name: str, url: str) -> None:
        self.calls.append(("add_remote", name, url))
        self.remotes[name] = url

    # Test helpers
    def seed_commits(self, count: int) -> None:
        """Create ``count`` commits without recording calls."""
        for _ in range(count):
            self.commit("seed", datetime(2020, 1, 1))
        self.calls.clear()

    def count_calls(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture
def fake_repository():
    """Empty fake repository on branch main."""
    return FakeRepository()


class InMemoryCheckpointStore:
    """CheckpointStorePort kept in memory."""

    def __init__(self) -> None:
        self.checkpoint: UndoCheckpoint | None = None

    def save(self, checkpoint: UndoCheckpoint) -> None:
        self.checkpoint = checkpoint

    def load(self) -> UndoCheckpoint | None:
        return self.checkpoint

    def delete(self) -> None:
        self.checkpoint = None


@pytest.fixture
def checkpoint_store():
    """Empty in-memory checkpoint store."""
    return InMemoryCheckpointStore()


class InMemorySavedRepositoryStore:
    """SavedRepositoryStorePort kept in memory."""

    def __init__(self) -> None:
        self.records: list[SavedRepository] = []

    def list(self) -> list[SavedRepository]:
        return list(self.records)

    def add(self, repository: SavedRepository) -> bool:
        if any(r.local_path == repository.local_path for r in self.records):
            return False
        self.records.append(repository)
        return True


@pytest.fixture
def saved_store():
    """Empty in-memory saved repository store."""
    return InMemorySavedRepositoryStore()


class FakePatternGenerator:
    """PatternGeneratorPort returning canned answers."""

    def __init__(self, intent: DrawingIntent | None = None, drawing: Drawing | None = None) -> None:
        self.intent = intent or DrawingIntent(intent="text", plan="Rendering text.", parameters={"text": "HI"})
        self.drawing = drawing if drawing is not None else Drawing.from_triples([(0, 0, 3)])
        self.triage_requests: list[str] = []
        self.descriptions: list[str] = []

    def triage(self, request: str) -> DrawingIntent:
        self.triage_requests.append(request)
        return self.intent

    def generate_pixels(self, description: str) -> Drawing:
        self.descriptions.append(description)
        return self.drawing


@pytest.fixture
def fake_generator():
    """Generator that classifies everything as text 'HI'."""
    return FakePatternGenerator()


class FakeRemoteHost:
    """RemoteHostPort that records created repositories."""

    def __init__(self, clone_url: str = "https://github.com/ada/art.git", error: Exception | None = None) -> None:
        self.clone_url = clone_url
        self.error = error
        self.created: list[tuple[str, bool, str]] = []

    def create_repository(self, name: str, private: bool, description: str) -> str:
        if self.error is not None:
            raise self.error
        self.created.append((name, private, description))
        return self.clone_url


@pytest.fixture
def fake_remote_host():
    """Remote host that always succeeds."""
    return FakeRemoteHost()
