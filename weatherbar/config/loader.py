"""YAML config loader."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from weatherbar.config.schema import WeatherbarConfig
from weatherbar.errors import ConfigError

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> WeatherbarConfig:
    """Load and validate config from a YAML file.

    No file is consulted without an explicit path: the built-in defaults
    are returned. An explicit path must exist.
    """
    if path is None:
        logger.debug("No config given, using defaults")
        return WeatherbarConfig()

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        return WeatherbarConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
