"""Tests for the composition root."""

import random

import pytest
from conftest import requires_git
from git import Repo

from gitartist.application.services import CommitPipelineService
from gitartist.composition import create_container
from gitartist.config import Credentials
from gitartist.infrastructure.repositories import FileCheckpointStore


class TestCreateContainer:
    """Tests for create_container."""

    @pytest.fixture(autouse=True)
    def no_ambient_token(self, monkeypatch, tmp_path):
        """Keep tokens from the environment out of the tests."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GITHUB_PAT", raising=False)

    def test_without_github_token(self, tmp_path):
        """Test that repository creation is disabled without a token."""
        container = create_container(tmp_path / "none.yaml", credentials=Credentials(google_api_key="k"))

        assert container.repository_service is None
        assert not container.can_create_repositories
        assert "heart" in container.drawing_service.shape_names

    def test_with_github_token(self, tmp_path):
        """Test that a token enables repository creation."""
        container = create_container(
            tmp_path / "none.yaml",
            credentials=Credentials(google_api_key="k", github_pat="t"),
        )

        assert container.can_create_repositories

    def test_storage_path_from_config(self, tmp_path):
        """Test that the saved repository file follows the config."""
        config_path = tmp_path / "git-artist.yaml"
        config_path.write_text(f"storage:\n  repositories_file: {tmp_path / 'repos.json'}\n")

        container = create_container(config_path, credentials=Credentials(google_api_key="k"))

        assert container.saved_repositories.path == tmp_path / "repos.json"

    @requires_git
    def test_open_workspace(self, tmp_path):
        """Test that a workspace binds services to a real repository."""
        Repo.init(tmp_path / "art")
        container = create_container(
            tmp_path / "none.yaml", credentials=Credentials(google_api_key="k"), rng=random.Random(1)
        )

        workspace = container.open_workspace(tmp_path / "art")

        assert isinstance(workspace.pipeline, CommitPipelineService)
        assert workspace.repository.head_commit() is None
        assert workspace.undo.peek() is None
        assert FileCheckpointStore(workspace.repository.git_dir).path.parent.name == ".git"
