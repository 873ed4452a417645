"""Domain errors.

Every failure the tool reports to the user derives from ``GitArtistError``.
Each error carries a short remediation hint for the interactive menu.
"""


class GitArtistError(Exception):
    """Base error for user-facing failures."""

    hint: str = ""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint


class ConfigurationError(GitArtistError):
    """Missing or invalid configuration."""


class NothingToUndoError(GitArtistError):
    """No checkpoint exists that could be restored."""

    hint = "Undo only works after a drawing was made from this repository."


class GitOperationError(GitArtistError):
    """A version-control command failed."""

    hint = "Check that the repository exists and its remote is reachable."


class CommitStepError(GitOperationError):
    """A commit in the middle of a drawing failed; the rest was skipped."""

    hint = "Partial commits were kept. Use undo to return to the saved checkpoint."

    def __init__(self, message: str, commits_made: int) -> None:
        super().__init__(message)
        self.commits_made = commits_made


class RemoteHostError(GitArtistError):
    """The hosting service refused or failed a request."""

    hint = "Check your network connection and try again."


class AuthenticationError(RemoteHostError):
    """The access token was rejected."""

    hint = "Your GITHUB_PAT is likely invalid or expired. Create a new token with the 'repo' scope."


class RepositoryExistsError(RemoteHostError):
    """A repository with the requested name already exists."""

    hint = "Choose a different repository name."


class RepositorySetupError(GitArtistError):
    """The local repository could not be prepared."""

    hint = "Remove the existing directory or choose a different name."


class PatternGenerationError(GitArtistError):
    """The generative service could not produce a usable answer."""

    hint = "Try rephrasing your description or check GOOGLE_API_KEY."


class TemplateError(GitArtistError):
    """A pixel template file could not be loaded."""

    hint = 'Templates are JSON files with a "pixels" list of [week, day, density] entries.'
