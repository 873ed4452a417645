"""Commit author identity value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthorIdentity:
    """Display name and email used for both author and committer."""

    name: str
    email: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Author name cannot be empty")
        if not self.email.strip():
            raise ValueError("Author email cannot be empty")

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
