"""Remote hosting port."""

from typing import Protocol


class RemoteHostPort(Protocol):
    """Protocol for the service hosting the remote repository."""

    def create_repository(self, name: str, private: bool, description: str) -> str:
        """Create a repository and return its clone URL.

        Raises:
            AuthenticationError: Token rejected.
            RepositoryExistsError: Name already taken.
            RemoteHostError: Any other failure.
        """
        ...
