"""Interactive prompts built on rich.prompt."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

T = TypeVar("T")

# Returns an error message, or None when the input is acceptable
Validator = Callable[[str], str | None]


def not_empty(label: str) -> Validator:
    def validate(value: str) -> str | None:
        return None if value.strip() else f"{label} cannot be empty."

    return validate


class Prompter:
    """Ask questions on a console, re-asking until the answer is valid."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def choose(self, message: str, options: Sequence[tuple[T, str]], default: int = 1) -> T:
        """Pick one option from a numbered list."""
        self._console.print(f"\n[bold]{message}[/bold]")
        for number, (_, label) in enumerate(options, start=1):
            self._console.print(f"  [cyan]{number}[/cyan]) {label}")
        answer = Prompt.ask(
            "Select",
            choices=[str(n) for n in range(1, len(options) + 1)],
            default=str(default),
            console=self._console,
        )
        return options[int(answer) - 1][0]

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str:
        while True:
            if default is None:
                value = Prompt.ask(message, console=self._console)
            else:
                value = Prompt.ask(message, default=default, console=self._console)
            error = validate(value) if validate else None
            if error is None:
                return value.strip()
            self._console.print(f"[red]{error}[/red]")

    def integer(self, message: str, default: int, minimum: int | None = None) -> int:
        while True:
            value = IntPrompt.ask(message, default=default, console=self._console)
            if minimum is None or value >= minimum:
                return value
            self._console.print(f"[red]Please enter a number of at least {minimum}.[/red]")

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self._console)
