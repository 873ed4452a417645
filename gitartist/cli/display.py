"""Display utilities for the interactive screens."""

import random
import sys

from rich.align import Align
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn
from rich.text import Text

from gitartist import __version__
from gitartist.application.services import GenerationResult
from gitartist.domain import DAYS_PER_WEEK, Drawing, GitArtistError

# Force UTF-8 for Windows console
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

console = Console()

LOGO = r"""
██████  ██  ██████      ████   █████   ██████  ██  ██████  ██████
██      ██    ██       ██  ██  ██  ██    ██    ██  ██        ██
██ ███  ██    ██       ██████  █████     ██    ██  ██████    ██
██  ██  ██    ██       ██  ██  ██ ██     ██    ██      ██    ██
██████  ██    ██       ██  ██  ██  ██    ██    ██  ██████    ██
"""

TAGLINE_DEFAULT = "Paint your contribution graph, one commit at a time."

TAGLINE_EASTER_EGGS = [
    "10x ENGINEER (BY VOLUME)",
    "MY GRAPH IS GREENER THAN YOUR LAWN",
    "git commit -m 'art'",
    "BOB ROSS, BUT FOR SUNDAYS",
    "HAPPY LITTLE COMMITS",
]

DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Calendar palette, lightest to darkest
DENSITY_STYLES = {
    1: "#0e4429",
    2: "#006d32",
    3: "#26a641",
    4: "#39d353",
}
EMPTY_STYLE = "#30363d"
CELL = "■"


def get_tagline() -> str:
    """Get tagline with 1% chance of easter egg."""
    if random.random() < 0.01:
        return random.choice(TAGLINE_EASTER_EGGS)
    return TAGLINE_DEFAULT


def _apply_gradient(lines: list[str], colors: list[str]) -> list[str]:
    """Apply color gradient to text lines."""
    return [
        f"[{colors[min(i, len(colors) - 1)]}]{line}[/{colors[min(i, len(colors) - 1)]}]"
        for i, line in enumerate(lines)
    ]


def display_banner() -> None:
    """Print the welcome screen."""
    logo_colored = _apply_gradient(
        LOGO.strip("\n").split("\n"),
        ["#0e4429", "#006d32", "#26a641", "#39d353", "bold #39d353"],
    )
    console.print()
    console.print(Align.center("\n".join(logo_colored)))
    console.print(Align.center(f"[dim]v{__version__}[/dim]  [bold green]{get_tagline()}[/bold green]"))
    console.print()


def render_preview(drawing: Drawing) -> Text:
    """Render a drawing as a 7-row calendar preview."""
    text = Text()
    grid = drawing.as_grid()
    for day in range(DAYS_PER_WEEK):
        text.append(f"{DAY_LABELS[day]} | ", style="dim")
        for density in grid[day]:
            if density > 0:
                text.append(CELL, style=DENSITY_STYLES.get(density, DENSITY_STYLES[1]))
            else:
                text.append("·", style=EMPTY_STYLE)
            text.append(" ")
        text.append("\n")
    return text


def display_preview(drawing: Drawing) -> None:
    """Print a preview of the drawing, or a notice when it is empty."""
    if drawing.is_empty:
        console.print("[yellow]No pixels to preview for this drawing.[/yellow]")
        return
    console.print("\n[bold yellow]--- Drawing Preview ---[/bold yellow]")
    console.print(render_preview(drawing), overflow="crop", no_wrap=True)
    console.print(f"[dim]{len(drawing)} pixels across {drawing.width} weeks[/dim]\n")


def display_error(error: GitArtistError) -> None:
    """Print an error with its remediation hint."""
    console.print(f"\n[bold red]Error:[/bold red] {error}")
    if error.hint:
        console.print(f"[yellow]Hint:[/yellow] {error.hint}")


def display_generation_result(result: GenerationResult) -> None:
    """Summarize a pipeline run."""
    if result.is_noop:
        console.print("[yellow]No pixels to draw. Nothing to commit.[/yellow]")
        return
    console.print(
        f"[green]Created {result.commits_made} commits for {result.pixels_drawn} days.[/green]"
    )
    if result.pushed:
        console.print("[bold green]Success! Your GitHub graph will update shortly.[/bold green]")
    else:
        console.print(
            "[red]Failed to push to GitHub. This can happen due to network issues "
            "or incorrect repository permissions.[/red]"
        )
        console.print(f"[dim]Error details: {result.push_error}[/dim]")
        console.print("[yellow]Your commits are still local. Push manually or use undo.[/yellow]")


class RichProgressReporter:
    """ProgressReporter that draws a rich progress bar, one step per day."""

    def __init__(self, target: Console | None = None) -> None:
        self._console = target or console
        self._progress: Progress | None = None
        self._task = None
        self.commits = 0

    def start(self, total: int) -> None:
        self._progress = Progress(
            TextColumn("[cyan]Painting commits"),
            BarColumn(complete_style="green"),
            MofNCompleteColumn(),
            TextColumn("days"),
            TimeElapsedColumn(),
            console=self._console,
        )
        self._progress.start()
        self._task = self._progress.add_task("paint", total=total)

    def advance(self, commits: int) -> None:
        self.commits += commits
        if self._progress is not None:
            self._progress.advance(self._task)

    def finish(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
