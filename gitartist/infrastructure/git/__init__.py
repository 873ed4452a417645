"""Git infrastructure."""

from .gitpython_repository import GitPythonRepository

__all__ = ["GitPythonRepository"]
