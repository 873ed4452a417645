"""GitHub infrastructure."""

from .github_client import GITHUB_API_URL, GitHubClient, authenticated_url

__all__ = ["GitHubClient", "GITHUB_API_URL", "authenticated_url"]
