from __future__ import annotations

from pathlib import Path
import logging

import yaml
from pydantic import ValidationError

from app.domain.models import Config

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the YAML configuration cannot be read or is invalid."""


def parse_config(content: str) -> Config:
    """
    Parse YAML text into a validated Config.
    """
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Configuration must be a mapping at the top level")

    try:
        return Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(path: Path) -> Config:
    """
    Read and validate the configuration file at ``path``.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    config = parse_config(content)
    logger.info("Loaded %d package(s) from %s", len(config.packages), path)
    return config
