"""Logging configuration."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "GIT_ARTIST_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

# Chatty third-party loggers
_QUIET_LOGGERS = ("httpx", "httpcore", "git.cmd")


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr.

    ``verbose`` forces DEBUG; otherwise $GIT_ARTIST_LOG_LEVEL is used so the
    interactive screens stay clean by default.
    """
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
