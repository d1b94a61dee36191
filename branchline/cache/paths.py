"""Cache file path utilities for branchline.

Contains:
- DEFAULT_CACHE_FILENAME: Name of the cache dotfile in the home directory
- get_default_cache_file: Get the default cache file path
"""

from pathlib import Path
from typing import Optional


DEFAULT_CACHE_FILENAME = ".statusline_cache"


def get_default_cache_file(home_dir: Optional[Path] = None) -> Path:
    """Return the default cache file path.

    Args:
        home_dir: Home directory to place the file in. Defaults to the
            current user's home.

    Returns:
        Path to ~/.statusline_cache
    """
    return (home_dir or Path.home()) / DEFAULT_CACHE_FILENAME
