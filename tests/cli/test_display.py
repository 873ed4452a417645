"""Tests for display helpers."""

from gitartist.application.services import GenerationResult
from gitartist.cli.display import RichProgressReporter, display_error, display_generation_result, render_preview
from gitartist.domain import Drawing, NothingToUndoError


class TestRenderPreview:
    """Tests for render_preview."""

    def test_grid_layout(self):
        """Test one labelled row per weekday and one cell per week."""
        text = render_preview(Drawing.from_triples([(0, 0, 4), (2, 6, 1)])).plain

        lines = text.splitlines()
        assert len(lines) == 7
        assert lines[0] == "Sun | ■ · · "
        assert lines[6] == "Sat | · · ■ "


class TestMessages:
    """Tests for user-facing messages."""

    def test_error_with_hint(self, capsys):
        """Test that errors print their remediation hint."""
        display_error(NothingToUndoError("Nothing here."))

        out = capsys.readouterr().out
        assert "Nothing here." in out
        assert "Hint:" in out

    def test_push_failure_summary(self, capsys):
        """Test that a failed push explains the commits are local."""
        display_generation_result(
            GenerationResult(pixels_drawn=2, commits_made=5, pushed=False, push_error="denied")
        )

        out = capsys.readouterr().out
        assert "Created 5 commits for 2 days" in out
        assert "denied" in out

    def test_noop_summary(self, capsys):
        """Test the message for an empty run."""
        display_generation_result(GenerationResult())

        assert "Nothing to commit" in capsys.readouterr().out


class TestRichProgressReporter:
    """Tests for RichProgressReporter."""

    def test_counts_commits(self):
        """Test that advances accumulate commit counts."""
        reporter = RichProgressReporter()

        reporter.start(2)
        reporter.advance(3)
        reporter.advance(4)
        reporter.finish()

        assert reporter.commits == 7
