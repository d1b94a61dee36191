"""Append-only TTL cache backed by a single file.

Each line of the cache file is one JSON-serialized CacheEntry. Writing a
key appends a new line; reading a key scans the whole file and keeps the
last matching line, so the most recently appended value wins. Entries
older than the TTL are ignored on read but never removed, so the file
grows with every write until compact() is called.

There is no locking. Concurrent writers from separate processes can
interleave lines, which may reorder appends across processes but cannot
corrupt an existing line.
"""

import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from pydantic import ValidationError

from branchline.cache.exceptions import CacheError
from branchline.cache.models import CacheEntry

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TTLCache:
    """Read-through friendly key/value cache with time-based expiry."""

    def __init__(
        self,
        file_path: Union[str, Path],
        ttl: timedelta,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the cache.

        Args:
            file_path: Path of the cache file. It is created on first write.
            ttl: Maximum age of an entry before it is treated as absent.
            now: Clock returning a timezone-aware datetime. Defaults to UTC now.
        """
        self.file_path = Path(file_path)
        self.ttl = ttl
        self._now = now or _utcnow

    def get(self, key: str) -> tuple[str, bool]:
        """Look up the latest live value for a key.

        A missing or unreadable cache file is a cold cache, not an error.

        Args:
            key: The key to look up.

        Returns:
            (content, True) on a hit, ("", False) if the key is absent or
            its latest entry has expired.
        """
        entry = self._get_latest_entry(key)
        if entry is None:
            return "", False

        if self._is_valid(entry):
            return entry.content, True

        return "", False

    def set(self, key: str, content: str) -> None:
        """Append a new entry for a key stamped with the current time.

        Args:
            key: The key to write.
            content: The payload to store.

        Raises:
            CacheError: If the cache file cannot be opened or written.
        """
        entry = CacheEntry(timestamp=self._now(), key=key, content=content)

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(entry.model_dump_json() + "\n")
        except OSError as e:
            raise CacheError(f"Failed to write cache file {self.file_path}: {e}")

    def entries(self) -> list[CacheEntry]:
        """Return every parseable entry in file order.

        Returns:
            List of entries, empty if the file is missing or unreadable.
        """
        try:
            return list(self._iter_entries())
        except OSError as e:
            logger.debug("Cache file %s unreadable: %s", self.file_path, e)
            return []

    def compact(self) -> int:
        """Rewrite the cache file keeping only the latest live entry per key.

        Expired entries, superseded entries and unparseable lines are
        dropped. The new content is written to a temporary file next to the
        cache file and then moved into place.

        Returns:
            Number of lines removed.

        Raises:
            CacheError: If the cache file cannot be read or rewritten.
        """
        if not self.file_path.exists():
            return 0

        try:
            with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
                total_lines = sum(1 for line in f if line.strip())
            latest: dict[str, CacheEntry] = {}
            for entry in self._iter_entries():
                # Re-insert so dict order follows the position of the latest entry
                latest.pop(entry.key, None)
                latest[entry.key] = entry
        except OSError as e:
            raise CacheError(f"Failed to read cache file {self.file_path}: {e}")

        kept = [entry for entry in latest.values() if self._is_valid(entry)]

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.file_path.name + ".", suffix=".tmp", dir=self.file_path.parent
            )
        except OSError as e:
            raise CacheError(f"Failed to rewrite cache file {self.file_path}: {e}")

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for entry in kept:
                    f.write(entry.model_dump_json() + "\n")
            os.replace(tmp_name, self.file_path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise CacheError(f"Failed to rewrite cache file {self.file_path}: {e}")

        return total_lines - len(kept)

    def clear(self) -> bool:
        """Delete the cache file.

        Returns:
            True if a file was removed, False if there was none.

        Raises:
            CacheError: If the file exists but cannot be removed.
        """
        try:
            self.file_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise CacheError(f"Failed to remove cache file {self.file_path}: {e}")
        return True

    def _get_latest_entry(self, key: str) -> Optional[CacheEntry]:
        latest = None
        try:
            for entry in self._iter_entries():
                if entry.key == key:
                    latest = entry
        except OSError as e:
            logger.debug("Cache file %s unreadable: %s", self.file_path, e)
            return None
        return latest

    def _iter_entries(self) -> Iterator[CacheEntry]:
        with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield CacheEntry.model_validate_json(line)
                except ValidationError:
                    # Foreign or partially written line
                    continue

    def _is_valid(self, entry: CacheEntry) -> bool:
        return self._now() - entry.timestamp <= self.ttl
