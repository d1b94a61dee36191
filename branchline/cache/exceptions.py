"""Cache-related exception classes.

Contains:
- CacheError: Raised when the cache file cannot be written, rewritten or removed
"""


class CacheError(Exception):
    """Raised when a cache file operation fails."""

    pass
