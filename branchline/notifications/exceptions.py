"""Notification-related exception classes.

Contains all exception classes for notification lookups:
- NotificationError: Base exception for notification API errors
- AuthError: Raised when the token is missing or rejected
- NetworkError: Raised when the API cannot be reached in time
- RateLimitedError: Raised when the API rate limit is exhausted
"""


class NotificationError(Exception):
    """Base exception for notification API errors."""

    pass


class AuthError(NotificationError):
    """Raised when the access token is missing or rejected."""

    pass


class NetworkError(NotificationError):
    """Raised when the request fails or times out."""

    pass


class RateLimitedError(NotificationError):
    """Raised when the API reports the rate limit is exhausted."""

    pass
