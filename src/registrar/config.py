"""Configuration loading for Registrar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "registrar.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class LoggingConfig:
    """Logging settings. None defers to the environment and library defaults."""

    dir: str | None = None
    level: str | None = None
    console: bool = True


@dataclass
class ApiConfig:
    """REST API bind address."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class RegistrarConfig:
    """Registrar configuration.

    ``catalog_path`` points at a YAML course catalog; when unset the bundled
    sample catalog is used.
    """

    catalog_path: str | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> RegistrarConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section is malformed.
        """
        for section in ("catalog", "logging", "api"):
            if section in data and not isinstance(data[section], dict):
                raise ConfigError(f"Section '{section}' must be a mapping")

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            dir=logging_data.get("dir"),
            level=logging_data.get("level"),
            console=logging_data.get("console", True),
        )

        api_data = data.get("api", {})
        try:
            port = int(api_data.get("port", 8000))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid api.port: {api_data.get('port')!r}") from e
        api_config = ApiConfig(host=api_data.get("host", "127.0.0.1"), port=port)

        return cls(
            catalog_path=data.get("catalog", {}).get("path"),
            logging=logging_config,
            api=api_config,
            root_path=root_path,
        )

    def get_catalog_path(self) -> Path | None:
        """Get absolute catalog path, or None for the bundled sample catalog."""
        if self.catalog_path is None:
            return None
        return self.root_path / self.catalog_path

    def get_log_dir(self) -> Path | None:
        if self.logging.dir is None:
            return None
        return self.root_path / self.logging.dir


def default_config() -> RegistrarConfig:
    """Configuration used when no registrar.yaml exists."""
    return RegistrarConfig(root_path=Path.cwd())


def load_config(config_path: Path | str) -> RegistrarConfig:
    """Load Registrar configuration from a YAML file.

    Args:
        config_path: Path to registrar.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RegistrarConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find registrar.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to registrar.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    start_path = Path.cwd() if start_path is None else Path(start_path)
    current = start_path.resolve()

    while True:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")
