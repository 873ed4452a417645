"""Interactive menu and drawing workflows."""

import logging
from datetime import date
from enum import Enum
from pathlib import Path

from gitartist.application.services import INTENT_CUSTOM_SHAPE
from gitartist.cli.display import (
    RichProgressReporter,
    console,
    display_error,
    display_generation_result,
    display_preview,
)
from gitartist.cli.prompts import Prompter, not_empty
from gitartist.container import Container, Workspace
from gitartist.domain import (
    AuthorIdentity,
    CheckpointAt,
    Drawing,
    GitArtistError,
    NothingToUndoError,
    load_pixels_from_file,
    parse_anchor_date,
    resolve_anchor,
)

logger = logging.getLogger(__name__)

GITHUB_PAT_STEPS = (
    "1. Go to https://github.com/settings/tokens/new",
    '2. Give the token a name (e.g., "git-artist-token") and an expiration date.',
    '3. Grant it the "repo" scope (full control of repositories).',
    '4. Click "Generate token" and copy it.',
    "5. Add this line to your .env file: GITHUB_PAT=your_new_token",
)


class Action(str, Enum):
    NEW_REPO = "new_repo"
    SAVED_REPO = "saved_repo"
    CURRENT_REPO = "current_repo"
    UNDO = "undo"
    WIPE = "wipe"
    EXIT = "exit"


class Feedback(str, Enum):
    PROCEED = "proceed"
    REFINE = "refine"
    CANCEL = "cancel"


MENU = [
    (Action.NEW_REPO, "Create New Art Repository & Draw (Recommended)"),
    (Action.SAVED_REPO, "Draw in a Saved Repository"),
    (Action.CURRENT_REPO, "Draw in Current Local Repository"),
    (Action.UNDO, "Undo Last Action (in current repo)"),
    (Action.WIPE, "Wipe All Commit History (in current repo)"),
    (Action.EXIT, "Exit"),
]


def _validate_date(value: str) -> str | None:
    try:
        parse_anchor_date(value)
    except ValueError as e:
        return str(e)
    return None


class ArtistApp:
    """Main menu loop.

    Every failure is reported and the loop returns to the menu.
    """

    def __init__(
        self,
        container: Container,
        start_path: Path,
        prompter: Prompter | None = None,
    ) -> None:
        self._container = container
        self._path = start_path
        self._prompter = prompter or Prompter(console)
        self._last_author: AuthorIdentity | None = None

    def run(self) -> None:
        while True:
            action = self._prompter.choose("What would you like to do?", MENU)
            if action is Action.EXIT:
                console.print("[yellow]Happy painting![/yellow]")
                return
            self.dispatch(action)
            console.print()

    def dispatch(self, action: Action) -> None:
        """Run one menu action, reporting any failure."""
        handlers = {
            Action.NEW_REPO: self.handle_new_repo,
            Action.SAVED_REPO: self.handle_saved_repo,
            Action.CURRENT_REPO: self.handle_current_repo,
            Action.UNDO: self.handle_undo,
            Action.WIPE: self.handle_wipe,
        }
        try:
            handlers[action]()
        except NothingToUndoError as e:
            console.print(f"[yellow]{e}[/yellow]")
        except GitArtistError as e:
            display_error(e)
        except Exception as e:
            logger.exception("Unexpected error during %s", action.value)
            console.print(f"\n[bold red]An unexpected error occurred:[/bold red] {e}")

    # ---------- workflows ----------

    def handle_new_repo(self) -> None:
        if not self._container.can_create_repositories:
            console.print("\n[bold red]GITHUB_PAT is not set.[/bold red]")
            console.print("[yellow]To use this feature, please follow these steps:[/yellow]")
            for step in GITHUB_PAT_STEPS:
                console.print(step)
            return

        service = self._container.repository_service
        name = self._prompter.text(
            "Enter a name for your new GitHub repository",
            validate=not_empty("Repository name"),
        )
        private = self._prompter.confirm(
            "Should this new repository be private? (enable 'private contributions' "
            "in your profile settings to see it on the graph)",
            default=False,
        )
        record = service.create_and_setup(name, private, self._path)
        console.print(f"[green]Repository ready at {record.local_path}[/green]")
        self._path = Path(record.local_path)
        self.draw_in(self._path)

    def handle_saved_repo(self) -> None:
        saved = self._container.saved_repositories.list()
        if not saved:
            console.print("[yellow]No saved repositories found. Create one first.[/yellow]")
            return
        record = self._prompter.choose(
            "Which repository do you want to draw in?",
            [(r, f"{r.name} [dim]({r.local_path})[/dim]") for r in saved],
        )
        self._path = Path(record.local_path)
        self.draw_in(self._path)

    def handle_current_repo(self) -> None:
        console.print(
            "[cyan]This requires a local git repository that is already linked to GitHub.[/cyan]"
        )
        self.draw_in(self._path)

    def handle_undo(self) -> None:
        workspace = self._container.open_workspace(self._path)
        question = "Are you sure you want to undo the last action?"
        checkpoint = workspace.undo.peek()
        if isinstance(checkpoint, CheckpointAt):
            question += f" (resets to {checkpoint.short_id})"
        if not self._prompter.confirm(question, default=True):
            console.print("[yellow]Undo operation cancelled.[/yellow]")
            return
        commit_id = workspace.undo.undo()
        console.print(f"[bold green]Undo successful. Reset to {commit_id[:7]}.[/bold green]")

    def handle_wipe(self) -> None:
        workspace = self._container.open_workspace(self._path)
        console.print("\n[bold red]This will delete the ENTIRE commit history of this repository.[/bold red]")
        confirmed = self._prompter.confirm(
            "Are you ABSOLUTELY SURE you want to wipe the ENTIRE commit history? This is irreversible.",
            default=False,
        )
        if not confirmed:
            console.print("[yellow]Wipe operation cancelled.[/yellow]")
            return
        author = self._last_author or self.ask_author()
        workspace.undo.checkpoint()
        branch = workspace.history_reset.reset(author)
        console.print(f"[bold green]Repository wiped. '{branch}' now holds a single commit.[/bold green]")

    # ---------- drawing ----------

    def draw_in(self, path: Path) -> None:
        """Full drawing flow for one repository."""
        workspace = self._container.open_workspace(path)
        anchor = self.ask_anchor()
        offset = self._prompter.integer(
            "Enter week offset (how many columns to shift right)",
            default=self._container.config.canvas.default_week_offset,
            minimum=0,
        )
        author = self.ask_author()

        shapes = ", ".join(self._container.drawing_service.shape_names)
        console.print(f"[dim]Pre-made shapes: {shapes}[/dim]")
        request = self._prompter.text(
            'Describe what you want to create (e.g., "star", "evin", "a helicopter") '
            "or give a path to a .json template",
            validate=not_empty("Description"),
        )
        drawing = self.ask_drawing(request, offset)
        if drawing is None:
            return

        final = drawing.shifted(offset)
        if final.is_empty:
            console.print(
                "[yellow]The artist couldn't create a drawing for that request. "
                "Please try being more descriptive.[/yellow]"
            )
            return

        if not self._prompter.confirm("Looks good, create the commits?", default=True):
            console.print("[red]Operation cancelled.[/red]")
            return

        self.commit_drawing(workspace, final, anchor, author)

    def ask_anchor(self) -> date:
        mode = self._prompter.choose(
            "How do you want to position your art on the timeline?",
            [
                ("auto", "Automatic (aligns with the start of your GitHub graph)"),
                ("specific", "Set a specific start date (YYYY-MM-DD)"),
            ],
        )
        if mode == "auto":
            anchor = resolve_anchor(policy=self._container.config.canvas.anchor_policy)
            console.print(f"[blue]Aligning art with graph start date: {anchor.isoformat()}[/blue]")
            return anchor

        text = self._prompter.text("Enter the start date (e.g., 2024-01-20)", validate=_validate_date)
        anchor = parse_anchor_date(text)
        console.print(f"[blue]Art will begin on the Sunday of that week: {anchor.isoformat()}[/blue]")
        return anchor

    def ask_author(self) -> AuthorIdentity:
        console.print("\n[bold cyan]Please provide the author details for the commits.[/bold cyan]")
        console.print("[dim]This email MUST be associated with the target GitHub account.[/dim]")
        last = self._last_author
        name = self._prompter.text(
            "Git author name",
            default=last.name if last else None,
            validate=not_empty("Author name"),
        )
        email = self._prompter.text(
            "Git author email",
            default=last.email if last else None,
            validate=not_empty("Author email"),
        )
        self._last_author = AuthorIdentity(name, email)
        return self._last_author

    def ask_drawing(self, request: str, offset: int) -> Drawing | None:
        """Resolve a request into a drawing; None when the user cancels."""
        template = Path(request).expanduser()
        if template.suffix.lower() == ".json" and template.exists():
            drawing = load_pixels_from_file(template)
            display_preview(drawing.shifted(offset))
            return drawing

        service = self._container.drawing_service
        console.print("[dim]\nTriage AI is analyzing your request...[/dim]")
        intent = service.interpret(request)
        console.print(f"[bold green]\nAI Plan:[/bold green] {intent.plan}")

        if intent.intent != INTENT_CUSTOM_SHAPE:
            drawing = service.resolve(intent)
            display_preview(drawing.shifted(offset))
            return drawing

        description = str(intent.parameters.get("description", request))
        drawing = service.resolve(intent)
        while True:
            display_preview(drawing.shifted(offset))
            if drawing.is_empty:
                console.print(
                    "[yellow]The artist couldn't create a drawing. "
                    "Please try being more descriptive.[/yellow]"
                )
                return None

            feedback = self._prompter.choose(
                "How does the generated art look?",
                [
                    (Feedback.PROCEED, "Looks great, proceed!"),
                    (Feedback.REFINE, "Let's refine this..."),
                    (Feedback.CANCEL, "Cancel this drawing"),
                ],
            )
            if feedback is Feedback.PROCEED:
                return drawing
            if feedback is Feedback.CANCEL:
                console.print("[red]Operation cancelled.[/red]")
                return None

            refinement = self._prompter.text(
                "What should I change? (e.g., 'make it wider', 'add more spikes')",
                validate=not_empty("Refinement"),
            )
            description, drawing = service.refine(description, refinement)

    def commit_drawing(
        self,
        workspace: Workspace,
        drawing: Drawing,
        anchor: date,
        author: AuthorIdentity,
    ) -> None:
        checkpoint = workspace.undo.checkpoint()
        console.print(f"[dim]Undo point saved ({checkpoint.serialize()[:7]}).[/dim]")
        console.print("[bold yellow]Painting commits, then pushing to remote...[/bold yellow]")
        result = workspace.pipeline.generate(drawing, anchor, author, RichProgressReporter())
        display_generation_result(result)
