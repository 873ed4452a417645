"""git-artist - paint pixel art on your contribution calendar with dated commits."""

__version__ = "0.3.0"
