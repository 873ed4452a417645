"""git-artist command line entry point."""

import sys
from pathlib import Path

from gitartist.cli.args import parse_args
from gitartist.cli.display import console, display_banner, display_error
from gitartist.domain import ConfigurationError
from gitartist.logging_setup import setup_logging


def _print_missing_api_key() -> None:
    console.print("\n[bold red]FATAL ERROR: GOOGLE_API_KEY is not set.[/bold red]")
    console.print("[yellow]Please follow these steps:[/yellow]")
    console.print("1. Get a key from https://aistudio.google.com/app/apikey")
    console.print("2. Create a file named .env in the directory you run git-artist from.")
    console.print("3. Add this line to the .env file: GOOGLE_API_KEY=your_key_here")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tool.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    # Imported late so --help and --version stay fast
    from gitartist.app import ArtistApp
    from gitartist.composition import create_container
    from gitartist.config import load_credentials

    credentials = load_credentials()
    if not credentials.google_api_key:
        _print_missing_api_key()
        return 1

    try:
        container = create_container(args.config, credentials=credentials)
    except ConfigurationError as e:
        display_error(e)
        return 1

    start_path = Path(args.path).resolve() if args.path else Path.cwd()
    display_banner()
    try:
        ArtistApp(container, start_path).run()
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted. Happy painting![/yellow]")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
