"""Tests for domain value objects."""

import json
from datetime import date, datetime, timezone

import pytest

from gitartist.domain import (
    AuthorIdentity,
    CheckpointAt,
    CommitOperation,
    NoHistoryYet,
    Pixel,
    parse_checkpoint,
)


class TestPixel:
    """Tests for Pixel value object."""

    def test_valid_pixel(self):
        """Test creating a pixel."""
        pixel = Pixel(3, 6, 4)

        assert (pixel.week, pixel.day, pixel.density) == (3, 6, 4)

    def test_negative_week_rejected(self):
        """Test that weeks start at 0."""
        with pytest.raises(ValueError, match="non-negative"):
            Pixel(-1, 0, 1)

    @pytest.mark.parametrize("day", [-1, 7])
    def test_day_out_of_range_rejected(self, day):
        """Test that day must be 0-6."""
        with pytest.raises(ValueError, match="Day"):
            Pixel(0, day, 1)

    def test_shifted(self):
        """Test moving a pixel right."""
        assert Pixel(1, 2, 3).shifted(4) == Pixel(5, 2, 3)


class TestAuthorIdentity:
    """Tests for AuthorIdentity."""

    def test_str(self):
        """Test git-style formatting."""
        assert str(AuthorIdentity("Ada", "ada@example.com")) == "Ada <ada@example.com>"

    @pytest.mark.parametrize(("name", "email"), [("", "a@b.c"), ("Ada", "  ")])
    def test_blank_fields_rejected(self, name, email):
        """Test that name and email are required."""
        with pytest.raises(ValueError):
            AuthorIdentity(name, email)


class TestCommitOperation:
    """Tests for CommitOperation."""

    def test_timestamp_pinned_to_midday_utc(self):
        """Test that commits are dated at 12:00 UTC on their day."""
        operation = CommitOperation(date(2024, 1, 24), 1, 0.5)

        assert operation.timestamp == datetime(2024, 1, 24, 12, 0, tzinfo=timezone.utc)

    def test_message(self):
        """Test the commit message format."""
        operation = CommitOperation(date(2024, 1, 24), 2, 0.5)

        assert operation.message == "feat: auto-commit for 2024-01-24"

    def test_payload(self):
        """Test the data file content."""
        operation = CommitOperation(date(2024, 1, 24), 2, 0.25)

        assert json.loads(operation.payload()) == {"date": "2024-01-24", "c": 2, "r": 0.25}


class TestCheckpoint:
    """Tests for undo checkpoint values."""

    def test_no_history_serializes_to_sentinel(self):
        """Test the persisted form of an empty-history checkpoint."""
        assert NoHistoryYet().serialize() == "initial"

    def test_parse_sentinel(self):
        """Test parsing the sentinel."""
        assert parse_checkpoint("initial\n") == NoHistoryYet()

    def test_parse_commit(self):
        """Test parsing a commit hash."""
        commit_id = "a" * 40

        checkpoint = parse_checkpoint(commit_id)

        assert checkpoint == CheckpointAt(commit_id)
        assert checkpoint.short_id == "aaaaaaa"

    @pytest.mark.parametrize("raw", ["", "not-a-hash", "   ", "-ab", "0x1f", "1_0", "ABCDEF12", "abc"])
    def test_parse_garbage_rejected(self, raw):
        """Test that non-hash content is rejected."""
        with pytest.raises(ValueError):
            parse_checkpoint(raw)
