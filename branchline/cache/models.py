"""Cache data models for branchline.

Contains Pydantic models for the cache file:
- CacheEntry: One line of the append-only cache log
"""

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


class CacheEntry(BaseModel):
    """A single immutable key/value record in the cache log."""

    timestamp: datetime
    key: str
    content: str

    @field_validator("timestamp")
    @classmethod
    def timestamp_must_be_aware(cls, v: datetime) -> datetime:
        """Treat timestamps without an offset as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
