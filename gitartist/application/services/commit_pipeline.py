"""Commit pipeline service - turns a drawing into dated commits."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from gitartist.domain import (
    AuthorIdentity,
    CommitDensityTranslator,
    CommitPlanEntry,
    CommitStepError,
    GitOperationError,
    Pixel,
    VersionControlPort,
    plan_date,
)

from ..ports import NullProgressReporter, ProgressReporter

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "data.json"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a pipeline run."""

    pixels_drawn: int = 0
    commits_made: int = 0
    pushed: bool = False
    push_error: str | None = None
    branch: str | None = None

    @property
    def is_noop(self) -> bool:
        return self.commits_made == 0

    @property
    def succeeded(self) -> bool:
        return self.pushed and self.push_error is None


def build_plan(pixels: Iterable[Pixel], anchor: date) -> list[CommitPlanEntry]:
    """Map pixels to dated plan entries, keeping pixel order."""
    return [CommitPlanEntry(plan_date(anchor, p.week, p.day), p.density) for p in pixels]


class CommitPipelineService:
    """Create every commit of a drawing, then force-push.

    Commits are made strictly one after another in pixel order; a failing
    commit aborts the run and leaves the commits made so far in place.
    """

    def __init__(
        self,
        repository: VersionControlPort,
        translator: CommitDensityTranslator | None = None,
        data_file: str = DEFAULT_DATA_FILE,
        remote: str = DEFAULT_REMOTE,
    ) -> None:
        self._repository = repository
        self._translator = translator or CommitDensityTranslator()
        self._data_file = data_file
        self._remote = remote

    def generate(
        self,
        pixels: Iterable[Pixel],
        anchor: date,
        author: AuthorIdentity,
        progress: ProgressReporter | None = None,
    ) -> GenerationResult:
        """Commit a drawing onto the calendar starting at ``anchor``.

        Args:
            pixels: Pixels in drawing order.
            anchor: Sunday of week 0.
            author: Identity for author and committer.
            progress: Optional progress receiver, advanced once per pixel.

        Returns:
            Result with commit count and push outcome.

        Raises:
            CommitStepError: A commit failed; remaining pixels were skipped.
        """
        plan = build_plan(pixels, anchor)
        if not plan:
            logger.info("No pixels to draw, repository left untouched")
            return GenerationResult()

        reporter = progress or NullProgressReporter()
        reporter.start(len(plan))
        commits_made = 0
        try:
            for entry in plan:
                made = self._commit_entry(entry, author, commits_made)
                commits_made += made
                reporter.advance(made)
        finally:
            reporter.finish()

        logger.info("Created %d commits for %d pixels", commits_made, len(plan))
        return self._push(len(plan), commits_made)

    def _commit_entry(self, entry: CommitPlanEntry, author: AuthorIdentity, made_before: int) -> int:
        operations = self._translator.expand(entry.date, entry.density)
        for done, operation in enumerate(operations):
            try:
                self._repository.write_file(self._data_file, operation.payload())
                self._repository.add(self._data_file)
                self._repository.commit(operation.message, operation.timestamp, author)
            except (GitOperationError, OSError) as e:
                logger.error("Commit failed date=%s index=%d: %s", entry.date, operation.index, e)
                raise CommitStepError(
                    f"Commit for {entry.date.isoformat()} failed: {e}",
                    commits_made=made_before + done,
                ) from e
        return len(operations)

    def _push(self, pixels_drawn: int, commits_made: int) -> GenerationResult:
        branch = None
        try:
            branch = self._repository.current_branch()
            self._repository.push(self._remote, branch, force=True)
        except GitOperationError as e:
            # Local commits stay; the user can push again or undo
            logger.warning("Push failed branch=%s: %s", branch, e)
            return GenerationResult(
                pixels_drawn=pixels_drawn,
                commits_made=commits_made,
                pushed=False,
                push_error=str(e),
                branch=branch,
            )
        return GenerationResult(
            pixels_drawn=pixels_drawn,
            commits_made=commits_made,
            pushed=True,
            branch=branch,
        )
