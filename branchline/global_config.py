"""Global configuration files for branchline.

Handles user-level files:
- ~/.branchline/config.yaml: Cache, timeout and path settings
- ~/.claude/.env: Credentials (GITHUB_TOKEN) and feature flags
  (SHOW_GITHUB_NOTIFICATIONS) in KEY=value format
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import dotenv_values


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


CONFIG_DIR_NAME = ".branchline"


def get_global_config_dir(home_dir: Optional[Path] = None) -> Path:
    """Get the global branchline configuration directory.

    Args:
        home_dir: Home directory to resolve against. Defaults to the user's home.

    Returns:
        Path to ~/.branchline/
    """
    return (home_dir or Path.home()) / CONFIG_DIR_NAME


def get_config_file_path(home_dir: Optional[Path] = None) -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.branchline/config.yaml
    """
    return get_global_config_dir(home_dir) / "config.yaml"


def load_global_config(home_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Load global configuration from ~/.branchline/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a YAML mapping.
    """
    config_file = get_config_file_path(home_dir)

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def load_credentials(env_file: Path) -> Dict[str, str]:
    """Load KEY=value pairs from a dotenv-style file.

    Blank lines and comments are skipped. Keys without a value are dropped.

    Args:
        env_file: Path of the file to read.

    Returns:
        Dictionary of keys to values. Empty dict if the file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read.
    """
    if not env_file.is_file():
        return {}

    try:
        values = dotenv_values(env_file)
    except (OSError, UnicodeDecodeError) as e:
        raise GlobalConfigError(f"Failed to load credentials from {env_file}: {e}")

    return {key: value.strip() for key, value in values.items() if value is not None}
