"""Progress port - interface for reporting pipeline progress."""

from typing import Protocol


class ProgressReporter(Protocol):
    """Receives progress updates from long-running operations.

    Purely informational; the reporting side never influences control flow.
    """

    def start(self, total: int) -> None:
        """Called once with the number of steps."""
        ...

    def advance(self, commits: int) -> None:
        """Called after each step with the commits it produced."""
        ...

    def finish(self) -> None:
        ...


class NullProgressReporter:
    """Reporter that ignores every update."""

    def start(self, total: int) -> None:
        pass

    def advance(self, commits: int) -> None:
        pass

    def finish(self) -> None:
        pass
