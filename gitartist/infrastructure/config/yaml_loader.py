"""YAML configuration loader."""

from pathlib import Path
from typing import Any

import yaml

from gitartist.domain import ConfigurationError


class YAMLConfigLoader:
    """Load configuration from YAML files."""

    def __init__(self, config_path: Path | str = "git-artist.yaml") -> None:
        self._config_path = Path(config_path).expanduser()

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.

        Raises:
            ConfigurationError: The file is not valid YAML or not a mapping.
        """
        if not self._config_path.exists():
            return {}

        try:
            with open(self._config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{self._config_path} must contain a mapping")
        return data

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
