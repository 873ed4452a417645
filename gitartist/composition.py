"""Composition root - the ONLY place where dependencies are wired."""

import random
from collections.abc import Callable
from functools import partial
from pathlib import Path

from gitartist.application.services import (
    CommitPipelineService,
    DrawingService,
    HistoryResetService,
    RepositoryService,
    UndoService,
)
from gitartist.config import Config, Credentials, load_config, load_credentials
from gitartist.container import Container, Workspace
from gitartist.domain import CommitDensityTranslator, ShapeLibrary, TextRenderer
from gitartist.infrastructure.ai import GeminiPatternGenerator
from gitartist.infrastructure.git import GitPythonRepository
from gitartist.infrastructure.github import GitHubClient, authenticated_url
from gitartist.infrastructure.repositories import FileCheckpointStore, JSONSavedRepositoryStore


def create_workspace_factory(
    config: Config,
    rng: random.Random | None = None,
) -> Callable[[Path], Workspace]:
    """Create a factory that binds services to a repository path."""
    git = config.git

    def factory(path: Path) -> Workspace:
        repository = GitPythonRepository.open(path)
        return Workspace(
            path=path,
            repository=repository,
            pipeline=CommitPipelineService(
                repository,
                translator=CommitDensityTranslator(rng),
                data_file=git.data_file,
                remote=git.remote,
            ),
            undo=UndoService(repository, FileCheckpointStore(repository.git_dir), remote=git.remote),
            history_reset=HistoryResetService(
                repository,
                data_file=git.data_file,
                remote=git.remote,
                primary_branch=git.primary_branch,
                temp_branch=git.reset_branch,
            ),
        )

    return factory


def create_container(
    config_path: Path | str | None = None,
    credentials: Credentials | None = None,
    rng: random.Random | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    This is the composition root - the single place where all
    dependencies are created and wired together.

    Args:
        config_path: Path to config file.
        credentials: Secrets, read from the environment when omitted.
        rng: Random source for commit counts.

    Returns:
        Fully wired dependency container.
    """
    config = load_config(config_path)
    credentials = credentials or load_credentials()

    shapes = ShapeLibrary()
    generator = GeminiPatternGenerator(
        api_key=credentials.google_api_key,
        model=config.ai.model,
        shape_names=shapes.names(),
        api_url=config.ai.api_url,
        timeout=config.ai.timeout,
    )
    drawing_service = DrawingService(generator, TextRenderer(), shapes)

    saved_repositories = JSONSavedRepositoryStore(config.storage.repositories_file)

    repository_service = None
    if credentials.github_pat:
        repository_service = RepositoryService(
            remote_host=GitHubClient(
                credentials.github_pat,
                api_url=config.github.api_url,
                timeout=config.github.timeout,
            ),
            store=saved_repositories,
            init_repository=partial(GitPythonRepository.init, initial_branch=config.git.primary_branch),
            remote=config.git.remote,
            push_url=partial(authenticated_url, token=credentials.github_pat),
        )

    return Container(
        config=config,
        drawing_service=drawing_service,
        saved_repositories=saved_repositories,
        workspace_factory=create_workspace_factory(config, rng),
        repository_service=repository_service,
    )
