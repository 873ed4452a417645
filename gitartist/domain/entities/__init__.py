"""Domain entities."""

from .drawing import Drawing

__all__ = ["Drawing"]
