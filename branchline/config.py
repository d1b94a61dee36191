"""Runtime configuration for branchline.

Settings are resolved in this order, later sources winning:
1. Built-in defaults
2. ~/.branchline/config.yaml
3. BRANCHLINE_CACHE_FILE / BRANCHLINE_ENV_FILE environment variables

Credentials and the notification flag come from the env file
(~/.claude/.env by default).
"""

import logging
import os
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from branchline import global_config
from branchline.cache import get_default_cache_file
from branchline.git import DEFAULT_GIT_TIMEOUT
from branchline.notifications import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_CACHE_TTL_SECONDS = 300.0
DEFAULT_NOTIFICATION_TIMEOUT = DEFAULT_TIMEOUT

# Env file keys
GITHUB_TOKEN_KEY = "GITHUB_TOKEN"
SHOW_NOTIFICATIONS_KEY = "SHOW_GITHUB_NOTIFICATIONS"

# Value shipped in example env files; treated as unset
TOKEN_PLACEHOLDER = "your_github_token_here"

# Process environment overrides
CACHE_FILE_ENV_VAR = "BRANCHLINE_CACHE_FILE"
ENV_FILE_ENV_VAR = "BRANCHLINE_ENV_FILE"


class StatuslineConfig(BaseModel):
    """Explicit configuration passed to the cache, gateway and renderer."""

    home_dir: Path
    cache_file: Path
    env_file: Path
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, gt=0)
    notification_timeout: float = Field(default=DEFAULT_NOTIFICATION_TIMEOUT, gt=0)
    git_timeout: float = Field(default=DEFAULT_GIT_TIMEOUT, gt=0)
    github_token: Optional[str] = None
    show_notifications: bool = False

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(seconds=self.cache_ttl_seconds)


def _load_settings(home_dir: Path) -> dict:
    """Read the YAML settings, falling back to defaults on any problem."""
    try:
        settings = global_config.load_global_config(home_dir)
    except global_config.GlobalConfigError as e:
        logger.warning("%s; using defaults", e)
        return {}

    known = {"cache_file", "env_file", "cache_ttl_seconds", "notification_timeout", "git_timeout"}
    return {key: value for key, value in settings.items() if key in known and value is not None}


def load_config(
    home_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> StatuslineConfig:
    """Build the runtime configuration.

    Never raises: unreadable or invalid settings are logged and replaced by
    defaults, so the status line always renders.

    Args:
        home_dir: Home directory for default paths. Defaults to the user's home.
        environ: Process environment. Defaults to os.environ.

    Returns:
        The resolved StatuslineConfig.
    """
    home_dir = home_dir or Path.home()
    environ = os.environ if environ is None else environ

    defaults = {
        "home_dir": home_dir,
        "cache_file": get_default_cache_file(home_dir),
        "env_file": home_dir / ".claude" / ".env",
    }
    values = dict(defaults)
    values.update(_load_settings(home_dir))

    if environ.get(CACHE_FILE_ENV_VAR):
        values["cache_file"] = environ[CACHE_FILE_ENV_VAR]
    if environ.get(ENV_FILE_ENV_VAR):
        values["env_file"] = environ[ENV_FILE_ENV_VAR]

    try:
        config = StatuslineConfig(**values)
    except ValidationError as e:
        # Only the offending keys revert; environment overrides are kept
        invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
        logger.warning("Invalid settings %s, using defaults for them: %s", sorted(invalid), e)
        for key in invalid:
            values.pop(key, None)
            if key in defaults:
                values[key] = defaults[key]
        config = StatuslineConfig(**values)

    config.cache_file = config.cache_file.expanduser()
    config.env_file = config.env_file.expanduser()

    try:
        credentials = global_config.load_credentials(config.env_file)
    except global_config.GlobalConfigError as e:
        logger.warning("%s", e)
        credentials = {}

    token = credentials.get(GITHUB_TOKEN_KEY) or None
    if token == TOKEN_PLACEHOLDER:
        token = None
    config.github_token = token
    config.show_notifications = credentials.get(SHOW_NOTIFICATIONS_KEY, "").lower() == "true"

    return config
