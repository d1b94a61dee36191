"""GitHub notifications API client.

Contains:
- fetch_notifications: Fetch unread participating notifications for a token
- NOTIFICATIONS_URL, DEFAULT_TIMEOUT: Endpoint and request timeout
"""

import logging
from typing import Optional

import requests
from pydantic import TypeAdapter, ValidationError

from branchline.notifications.exceptions import (
    AuthError,
    NetworkError,
    NotificationError,
    RateLimitedError,
)
from branchline.notifications.models import Notification

logger = logging.getLogger(__name__)

NOTIFICATIONS_URL = "https://api.github.com/notifications"
NOTIFICATIONS_PARAMS = {"all": "false", "participating": "true"}

DEFAULT_TIMEOUT = 10.0

_NOTIFICATION_LIST = TypeAdapter(list[Notification])


def _raise_for_status(response: requests.Response) -> None:
    """Map a non-200 API response to a NotificationError subclass."""
    status = response.status_code
    if status == 200:
        return

    body = response.text[:200]
    if status == 429 or (status in (401, 403) and response.headers.get("X-RateLimit-Remaining") == "0"):
        raise RateLimitedError(f"GitHub API rate limit exceeded ({status})")
    if status in (401, 403):
        raise AuthError(f"GitHub API rejected the token ({status}): {body}")
    raise NotificationError(f"GitHub API error {status}: {body}")


def fetch_notifications(
    token: str,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> list[Notification]:
    """Fetch unread notifications the user is participating in.

    Args:
        token: GitHub personal access token.
        timeout: Seconds to wait for the API before giving up.
        session: Optional requests session to send the request with.

    Returns:
        List of notifications.

    Raises:
        AuthError: If the token is empty or rejected.
        RateLimitedError: If the API rate limit is exhausted.
        NetworkError: If the request fails or times out.
        NotificationError: For any other non-200 response or malformed payload.
    """
    if not token:
        raise AuthError("GitHub token not provided")

    headers = {
        "Authorization": f"token {token}",
        "Accept": "application/vnd.github+json",
        "User-Agent": "branchline",
    }

    http = session or requests
    try:
        response = http.get(
            NOTIFICATIONS_URL,
            params=NOTIFICATIONS_PARAMS,
            headers=headers,
            timeout=timeout,
        )
    except requests.Timeout:
        raise NetworkError(f"GitHub API request timed out after {timeout}s")
    except requests.RequestException as e:
        raise NetworkError(f"GitHub API request failed: {e}")

    _raise_for_status(response)

    try:
        notifications = _NOTIFICATION_LIST.validate_python(response.json())
    except (ValueError, ValidationError) as e:
        raise NotificationError(f"Failed to parse GitHub API response: {e}")

    logger.debug("Fetched %d notifications", len(notifications))
    return notifications
