"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import SerenityConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".serenity" / "config.yaml",
        Path.home() / "serenity" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> SerenityConfig:
    """Load configuration from file or defaults.

    Raises:
        ValueError: If the file is not valid YAML or fails validation
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return SerenityConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")
