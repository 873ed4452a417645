"""Command line argument parsing."""

import argparse
from collections.abc import Sequence

from gitartist import __version__


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - path: Repository directory for draw/undo/wipe (optional)
        - config: Path to a YAML config file (optional)
        - verbose: Whether to show detailed logs
    """
    parser = argparse.ArgumentParser(
        prog="git-artist",
        description="git-artist - Paint pixel art on your GitHub contribution graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "environment:\n"
            "  GOOGLE_API_KEY   required, key for the generative artist\n"
            "  GITHUB_PAT       optional, token with 'repo' scope for creating repositories"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Repository to work in (default: current directory)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (default: $GIT_ARTIST_CONFIG_PATH or ./git-artist.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )
    return parser.parse_args(argv)
