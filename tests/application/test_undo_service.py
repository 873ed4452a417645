"""Tests for UndoService."""

import pytest

from gitartist.application.services import CommitPipelineService, UndoService
from gitartist.domain import (
    CheckpointAt,
    CommitDensityTranslator,
    GitOperationError,
    NoHistoryYet,
    NothingToUndoError,
    Pixel,
)


@pytest.fixture
def undo(fake_repository, checkpoint_store):
    """Undo service over fakes."""
    return UndoService(fake_repository, checkpoint_store)


class TestCheckpoint:
    """Tests for capturing checkpoints."""

    def test_empty_repository_gives_no_history(self, undo, checkpoint_store):
        """Test the checkpoint of a repository without commits."""
        checkpoint = undo.checkpoint()

        assert checkpoint == NoHistoryYet()
        assert checkpoint_store.checkpoint == NoHistoryYet()

    def test_checkpoint_is_current_tip(self, undo, fake_repository):
        """Test that the tip commit is recorded."""
        fake_repository.seed_commits(2)

        checkpoint = undo.checkpoint()

        assert checkpoint == CheckpointAt(fake_repository.head_commit())
        assert undo.peek() == checkpoint

    def test_new_checkpoint_replaces_old(self, undo, fake_repository):
        """Test that only one checkpoint is kept."""
        fake_repository.seed_commits(1)
        undo.checkpoint()
        fake_repository.seed_commits(1)

        undo.checkpoint()

        assert undo.peek() == CheckpointAt(fake_repository.head_commit())


class TestUndo:
    """Tests for restoring checkpoints."""

    def test_undo_restores_tip_after_generation(
        self, undo, fake_repository, anchor, author, seeded_rng
    ):
        """Test that undo after a drawing returns to the previous tip."""
        fake_repository.seed_commits(2)
        before = fake_repository.head_commit()
        undo.checkpoint()
        CommitPipelineService(fake_repository, CommitDensityTranslator(seeded_rng)).generate(
            [Pixel(0, 0, 2)], anchor, author
        )
        assert fake_repository.head_commit() != before

        restored = undo.undo()

        assert restored == before
        assert fake_repository.head_commit() == before
        assert fake_repository.pushes[-1] == ("origin", "main", True)

    def test_checkpoint_consumed(self, undo, fake_repository, checkpoint_store):
        """Test that a second undo finds nothing."""
        fake_repository.seed_commits(1)
        undo.checkpoint()
        undo.undo()

        assert checkpoint_store.checkpoint is None
        with pytest.raises(NothingToUndoError, match="no saved undo point"):
            undo.undo()

    def test_undo_without_checkpoint(self, undo, fake_repository):
        """Test that undo without a checkpoint fails and touches nothing."""
        with pytest.raises(NothingToUndoError):
            undo.undo()

        assert fake_repository.calls == []

    def test_undo_of_first_action(self, undo, fake_repository, checkpoint_store):
        """Test that NoHistoryYet cannot be restored and nothing is mutated."""
        undo.checkpoint()
        fake_repository.seed_commits(3)

        with pytest.raises(NothingToUndoError, match="first action"):
            undo.undo()

        assert fake_repository.commit_count() == 3
        assert fake_repository.count_calls("reset_hard") == 0
        assert fake_repository.count_calls("push") == 0
        assert checkpoint_store.checkpoint == NoHistoryYet()

    def test_failed_push_keeps_checkpoint(self, undo, fake_repository, checkpoint_store):
        """Test that the checkpoint survives a failed push so undo can be retried."""
        fake_repository.seed_commits(2)
        undo.checkpoint()
        fake_repository.fail_push = True

        with pytest.raises(GitOperationError):
            undo.undo()

        assert checkpoint_store.checkpoint is not None
