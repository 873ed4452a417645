"""Tests for HistoryResetService."""

import json
from datetime import UTC, datetime

import pytest
from conftest import FakeRepository

from gitartist.application.services import HistoryResetService
from gitartist.domain import GitOperationError


class TestHistoryReset:
    """Tests for wiping history."""

    def test_single_commit_on_primary_branch(self, fake_repository, author):
        """Test that the result is one commit on main, force-pushed."""
        fake_repository.seed_commits(25)
        service = HistoryResetService(fake_repository)

        branch = service.reset(author)

        assert branch == "main"
        assert fake_repository.current_branch() == "main"
        assert fake_repository.commit_count() == 1
        assert set(fake_repository.branches) == {"main"}
        assert fake_repository.pushes == [("origin", "main", True)]
        assert fake_repository.commits[-1]["message"] == "chore: repository reset"
        assert fake_repository.commits[-1]["author"] == author

    def test_step_order(self, fake_repository):
        """Test orphan, commit, delete old, rename, push."""
        fake_repository.seed_commits(1)

        HistoryResetService(fake_repository).reset()

        names = [call[0] for call in fake_repository.calls if call[0] != "current_branch"]
        assert names == [
            "checkout_orphan",
            "write_file",
            "add",
            "commit",
            "delete_branch",
            "rename_branch",
            "push",
        ]

    def test_marker_file_written(self, fake_repository):
        """Test the reset marker content."""
        now = datetime(2025, 3, 1, 9, 30, tzinfo=UTC)

        HistoryResetService(fake_repository, data_file="data.json").reset(now=now)

        assert json.loads(fake_repository.files["data.json"]) == {"reset": now.isoformat()}
        assert fake_repository.commits[-1]["when"] == now

    def test_leftover_temp_branch_removed(self, fake_repository):
        """Test that an interrupted reset does not block a new one."""
        fake_repository.branches["git-artist-reset"] = ["dead"]

        HistoryResetService(fake_repository).reset()

        assert fake_repository.calls[0] == ("delete_branch", "git-artist-reset")
        assert set(fake_repository.branches) == {"main"}

    def test_other_branch_renamed_to_primary(self, author):
        """Test wiping from a non-primary branch also drops the old primary."""
        repository = FakeRepository(branch="drawing")
        repository.branches["main"] = ["old"]
        repository.seed_commits(2)

        HistoryResetService(repository).reset(author)

        assert set(repository.branches) == {"main"}
        assert repository.commit_count() == 1

    def test_unreadable_branch_falls_back_to_primary(self, fake_repository):
        """Test that a failing branch lookup still completes the reset."""
        fake_repository.fail_current_branch = True

        branch = HistoryResetService(fake_repository, primary_branch="main").reset()

        assert branch == "main"
        assert fake_repository.pushes == [("origin", "main", True)]

    def test_failed_commit_returns_to_old_branch(self, fake_repository, author):
        """Test that a failed marker commit leaves the old history in place."""
        fake_repository.seed_commits(2)
        fake_repository.fail_commit_at = 2

        with pytest.raises(GitOperationError):
            HistoryResetService(fake_repository).reset(author)

        assert fake_repository.current_branch() == "main"
        assert set(fake_repository.branches) == {"main"}
        assert fake_repository.commit_count() == 2
        assert ("checkout", "main", True) in fake_repository.calls
        assert fake_repository.pushes == []
