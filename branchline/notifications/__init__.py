"""Notification lookup for branchline.

This package provides the notification badge data:
- exceptions: NotificationError, AuthError, NetworkError, RateLimitedError
- models: Notification, NotificationCount
- client: fetch_notifications (GitHub API)
- gateway: NotificationGateway (cached count lookup)
"""

# Exceptions
from branchline.notifications.exceptions import (
    AuthError,
    NetworkError,
    NotificationError,
    RateLimitedError,
)

# Models
from branchline.notifications.models import (
    Notification,
    NotificationCount,
)

# API client
from branchline.notifications.client import (
    DEFAULT_TIMEOUT,
    NOTIFICATIONS_URL,
    fetch_notifications,
)

# Cached lookup
from branchline.notifications.gateway import (
    NOTIFICATIONS_CACHE_KEY,
    NotificationGateway,
)


__all__ = [
    # Exceptions
    "AuthError",
    "NetworkError",
    "NotificationError",
    "RateLimitedError",
    # Models
    "Notification",
    "NotificationCount",
    # Client
    "DEFAULT_TIMEOUT",
    "NOTIFICATIONS_URL",
    "fetch_notifications",
    # Gateway
    "NOTIFICATIONS_CACHE_KEY",
    "NotificationGateway",
]
