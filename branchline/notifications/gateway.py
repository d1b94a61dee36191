"""Cached notification count lookup.

The count is read through the TTL cache: a live cached value is returned
without contacting the API, and a successful fetch is written back. Failed
fetches are never cached, so the next render retries.
"""

import json
import logging
from typing import Callable, Optional, Sequence

from branchline.cache import CacheError, TTLCache
from branchline.notifications.exceptions import NotificationError
from branchline.notifications.models import NotificationCount

logger = logging.getLogger(__name__)

NOTIFICATIONS_CACHE_KEY = "github_notifications"

Fetcher = Callable[[str], Sequence[object]]


class NotificationGateway:
    """Resolve the notification count through the cache."""

    def __init__(
        self,
        cache: TTLCache,
        fetcher: Fetcher,
        cache_key: str = NOTIFICATIONS_CACHE_KEY,
    ):
        """Initialize the gateway.

        Args:
            cache: Cache to read through.
            fetcher: Callable taking a token and returning the notifications.
                Raises NotificationError on failure.
            cache_key: Key the count is stored under.
        """
        self.cache = cache
        self.fetcher = fetcher
        self.cache_key = cache_key

    def resolve(self, token: Optional[str]) -> NotificationCount:
        """Get the notification count for a token.

        Args:
            token: API access token. None or empty means not configured.

        Returns:
            The count, or an unavailable result when no token is set or
            the fetch fails.
        """
        if not token:
            return NotificationCount.unavailable()

        cached = self._load_cached_count()
        if cached is not None:
            return NotificationCount.of(cached)

        try:
            notifications = self.fetcher(token)
        except NotificationError as e:
            logger.info("Notification fetch failed: %s", e)
            return NotificationCount.unavailable()

        count = len(notifications)
        try:
            self.cache.set(self.cache_key, json.dumps(count))
        except CacheError as e:
            logger.warning("Could not cache notification count: %s", e)

        return NotificationCount.of(count)

    def count(self, token: Optional[str]) -> int:
        """Get the notification count, or -1 when unavailable."""
        return self.resolve(token).as_sentinel()

    def _load_cached_count(self) -> Optional[int]:
        content, found = self.cache.get(self.cache_key)
        if not found:
            return None

        try:
            value = json.loads(content)
        except ValueError:
            logger.debug("Ignoring malformed cached count: %r", content)
            return None

        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.debug("Ignoring malformed cached count: %r", content)
            return None
        return value
