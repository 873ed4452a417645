"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitartist.domain import AnchorPolicy, ConfigurationError
from gitartist.infrastructure.config import YAMLConfigLoader

DEFAULT_CONFIG_PATH = "git-artist.yaml"
CONFIG_PATH_ENV = "GIT_ARTIST_CONFIG_PATH"


class CanvasConfig(BaseModel):
    """Where drawings land on the calendar."""

    anchor_policy: AnchorPolicy = AnchorPolicy.FIFTY_THREE_WEEKS
    default_week_offset: int = Field(default=1, ge=0, le=52)


class GitConfig(BaseModel):
    """Repository conventions."""

    remote: str = "origin"
    primary_branch: str = "main"
    data_file: str = "data.json"
    reset_branch: str = "git-artist-reset"

    @field_validator("data_file")
    @classmethod
    def validate_relative(cls, v: str) -> str:
        """Data file must stay inside the working tree."""
        path = Path(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"data_file must be a relative path inside the repository: {v}")
        return v


class AIConfig(BaseModel):
    """Generative artist settings."""

    model: str = "gemini-1.5-flash-latest"
    api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = Field(default=60.0, gt=0)


class GitHubConfig(BaseModel):
    """GitHub REST settings."""

    api_url: str = "https://api.github.com"
    timeout: float = Field(default=15.0, gt=0)


class StorageConfig(BaseModel):
    """Local state files."""

    repositories_file: Path = Path("~/.config/git-artist/repositories.json")


class Config(BaseModel):
    """Application configuration."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    ai: AIConfig = Field(default_factory=AIConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


class Credentials(BaseSettings):
    """Secrets read from the environment or a local ``.env`` file."""

    google_api_key: str = ""
    github_pat: str = ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def resolve_config_path(config_path: Path | str | None = None) -> Path:
    """Explicit path, then $GIT_ARTIST_CONFIG_PATH, then ./git-artist.yaml."""
    return Path(config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Raises:
        ConfigurationError: The file exists but is invalid.
    """
    loader = YAMLConfigLoader(resolve_config_path(config_path))
    data = loader.load()
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {loader.path}:\n{e}") from e


def load_credentials() -> Credentials:
    return Credentials()
