"""GitHub REST client for repository creation."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from gitartist import __version__
from gitartist.domain import AuthenticationError, RemoteHostError, RepositoryExistsError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubClient:
    """Create repositories on the token owner's GitHub account."""

    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_API_URL,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"git-artist/{__version__}",
        }

    def create_repository(self, name: str, private: bool, description: str) -> str:
        """Create a repository and return its HTTPS clone URL."""
        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
                response = client.post(
                    f"{self._api_url}/user/repos",
                    json={
                        "name": name,
                        "description": description,
                        "private": private,
                        "auto_init": False,
                    },
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            raise RemoteHostError(f"Network error while contacting GitHub: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError("GitHub authentication failed.")
        if response.status_code == 422:
            raise RepositoryExistsError(
                f'Could not create repository. A repository named "{name}" likely already exists.'
            )
        if response.status_code != 201:
            raise RemoteHostError(
                f"GitHub API error: {response.status_code} - {_error_message(response)}"
            )

        payload: Any = response.json()
        if not isinstance(payload, Mapping) or not isinstance(payload.get("clone_url"), str):
            raise RemoteHostError("GitHub response is missing the clone URL")
        return payload["clone_url"]


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, Mapping):
        return str(payload.get("message", ""))
    return ""


def authenticated_url(clone_url: str, token: str) -> str:
    """Embed a token into an HTTPS clone URL so pushes need no prompt."""
    if clone_url.startswith("https://") and token:
        return clone_url.replace("https://", f"https://{token}@", 1)
    return clone_url
