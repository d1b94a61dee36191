"""Cache module for branchline.

This package provides the file-backed TTL cache used to avoid re-querying
rate-limited APIs on every prompt render:
- exceptions: CacheError
- models: CacheEntry data model
- paths: Default cache file location
- store: TTLCache append-only key/value store
"""

from branchline.cache.exceptions import CacheError
from branchline.cache.models import CacheEntry
from branchline.cache.paths import (
    DEFAULT_CACHE_FILENAME,
    get_default_cache_file,
)
from branchline.cache.store import TTLCache


__all__ = [
    "CacheError",
    "CacheEntry",
    "DEFAULT_CACHE_FILENAME",
    "get_default_cache_file",
    "TTLCache",
]
