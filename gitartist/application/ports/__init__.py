"""Application layer ports - interfaces for presentation layer."""

from .progress_port import NullProgressReporter, ProgressReporter

__all__ = [
    "ProgressReporter",
    "NullProgressReporter",
]
