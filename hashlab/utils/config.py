"""
Configuration loader for HashLab.

Reads configs/config.yaml and provides a single dict accessible
throughout the project. Output locations, the default hash, report
formatting and sample-corpus parameters all live in that file.
"""

import os
from pathlib import Path
import yaml


# Project root = two levels up from this file (hashlab/utils/config.py → repo root)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "config.yaml"

# Environment override for running against a different config file
CONFIG_ENV_VAR = "HASHLAB_CONFIG"


def load_config(config_path: str | Path | None = None) -> dict:
    """Load YAML configuration file and return as a dictionary.

    Args:
        config_path: Path to config file. Defaults to $HASHLAB_CONFIG,
            then configs/config.yaml.

    Returns:
        Configuration dictionary.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    return config


# Singleton: loaded once, imported everywhere
_config = None


def get_config() -> dict:
    """Return the cached configuration (loads on first call)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
