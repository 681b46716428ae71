"""Configuration loading."""

import logging
from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML
from pydantic import ValidationError

from nydus_build.models.config import NydusBuildConfig


logger = logging.getLogger(__name__)


def _read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse YAML file."""
    yaml = YAML(typ="safe")
    data = yaml.load(file_path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}")
    return data


def load_config(config_file: Path) -> NydusBuildConfig:
    """Load a build configuration file.

    The file may hold a `builder` section with executable settings plus
    `create` and/or `compact` sections mirroring the option models.
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"Config not found: {config_file}")

    data = _read_yaml(config_file)
    try:
        config = NydusBuildConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid config {config_file}: {e}")
        raise

    logger.debug(f"Loaded config: {config_file}")
    return config
