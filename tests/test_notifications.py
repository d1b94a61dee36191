"""Tests for branchline.notifications module."""

import json
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
import requests

from branchline.cache import CacheError, TTLCache
from branchline.notifications import (
    NOTIFICATIONS_CACHE_KEY,
    NOTIFICATIONS_URL,
    AuthError,
    NetworkError,
    Notification,
    NotificationCount,
    NotificationError,
    NotificationGateway,
    RateLimitedError,
    fetch_notifications,
)


def _response(status_code: int = 200, payload=None, headers=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


class TestNotificationModels:
    """Tests for Notification and NotificationCount models."""

    def test_parses_api_payload(self, sample_notifications_payload):
        """Test that API fields are mapped and extras ignored."""
        payload = dict(sample_notifications_payload[0], updated_at="2024-01-01T00:00:00Z")
        notification = Notification.model_validate(payload)

        assert notification.subject.type == "PullRequest"
        assert notification.repository.full_name == "octo/repo"
        assert notification.reason == "review_requested"

    def test_null_fields_become_empty(self):
        """Test that JSON nulls from check suite threads are accepted."""
        notification = Notification.model_validate({
            "id": "3",
            "reason": None,
            "unread": True,
            "subject": {"title": "CI run failed", "url": None, "type": "CheckSuite"},
            "repository": {"full_name": None},
        })

        assert notification.subject.url == ""
        assert notification.reason == ""
        assert notification.repository.full_name == ""

    def test_count_available(self):
        """Test an available count."""
        result = NotificationCount.of(0)
        assert result.available is True
        assert result.as_sentinel() == 0

    def test_count_unavailable_sentinel(self):
        """Test that an unavailable count maps to -1."""
        assert NotificationCount.unavailable().as_sentinel() == -1


class TestFetchNotifications:
    """Tests for fetch_notifications function."""

    def test_returns_notifications(self, mocker, sample_notifications_payload):
        """Test a successful fetch."""
        mock_get = mocker.patch(
            "requests.get", return_value=_response(payload=sample_notifications_payload)
        )

        notifications = fetch_notifications("ghp_token", timeout=3)

        assert len(notifications) == 2
        assert notifications[1].subject.title == "Crash on empty input"
        args, kwargs = mock_get.call_args
        assert args[0] == NOTIFICATIONS_URL
        assert kwargs["headers"]["Authorization"] == "token ghp_token"
        assert kwargs["params"] == {"all": "false", "participating": "true"}
        assert kwargs["timeout"] == 3

    def test_uses_session(self, sample_notifications_payload):
        """Test that a provided session is used for the request."""
        session = MagicMock()
        session.get.return_value = _response(payload=sample_notifications_payload)

        assert len(fetch_notifications("ghp_token", session=session)) == 2
        session.get.assert_called_once()

    def test_empty_token(self, mocker):
        """Test that a missing token fails without a request."""
        mock_get = mocker.patch("requests.get")

        with pytest.raises(AuthError):
            fetch_notifications("")
        mock_get.assert_not_called()

    def test_unauthorized(self, mocker):
        """Test that a rejected token raises AuthError."""
        mocker.patch("requests.get", return_value=_response(401, text="Bad credentials"))

        with pytest.raises(AuthError) as exc_info:
            fetch_notifications("bad")
        assert "401" in str(exc_info.value)

    def test_rate_limited_403(self, mocker):
        """Test that an exhausted rate limit raises RateLimitedError."""
        mocker.patch(
            "requests.get",
            return_value=_response(403, headers={"X-RateLimit-Remaining": "0"}),
        )

        with pytest.raises(RateLimitedError):
            fetch_notifications("ghp_token")

    def test_rate_limited_429(self, mocker):
        """Test that HTTP 429 raises RateLimitedError."""
        mocker.patch("requests.get", return_value=_response(429))

        with pytest.raises(RateLimitedError):
            fetch_notifications("ghp_token")

    def test_server_error(self, mocker):
        """Test that other non-200 responses raise NotificationError."""
        mocker.patch("requests.get", return_value=_response(502, text="Bad gateway"))

        with pytest.raises(NotificationError) as exc_info:
            fetch_notifications("ghp_token")
        assert "502" in str(exc_info.value)

    def test_timeout(self, mocker):
        """Test that a timeout raises NetworkError."""
        mocker.patch("requests.get", side_effect=requests.Timeout())

        with pytest.raises(NetworkError):
            fetch_notifications("ghp_token")

    def test_connection_error(self, mocker):
        """Test that a connection failure raises NetworkError."""
        mocker.patch("requests.get", side_effect=requests.ConnectionError("refused"))

        with pytest.raises(NetworkError):
            fetch_notifications("ghp_token")

    def test_invalid_json(self, mocker):
        """Test that an unparseable body raises NotificationError."""
        mocker.patch("requests.get", return_value=_response(payload=ValueError("bad json")))

        with pytest.raises(NotificationError):
            fetch_notifications("ghp_token")

    def test_unexpected_payload_shape(self, mocker):
        """Test that a non-list payload raises NotificationError."""
        mocker.patch("requests.get", return_value=_response(payload={"message": "oops"}))

        with pytest.raises(NotificationError):
            fetch_notifications("ghp_token")


@pytest.fixture
def cache(cache_file, clock):
    return TTLCache(cache_file, timedelta(minutes=5), now=clock)


class TestNotificationGateway:
    """Tests for NotificationGateway."""

    def test_no_token(self, cache):
        """Test that no token means unavailable without fetching."""
        fetcher = MagicMock()
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count(None) == -1
        assert gateway.count("") == -1
        fetcher.assert_not_called()

    def test_miss_fetches_and_caches(self, cache):
        """Test that a miss fetches and writes the count back."""
        fetcher = MagicMock(return_value=["n1", "n2", "n3"])
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count("ghp_token") == 3
        fetcher.assert_called_once_with("ghp_token")
        assert cache.get(NOTIFICATIONS_CACHE_KEY) == ("3", True)

    def test_hit_does_not_fetch(self, cache):
        """Test that a cached count is returned without fetching."""
        cache.set(NOTIFICATIONS_CACHE_KEY, "7")
        fetcher = MagicMock()
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count("ghp_token") == 7
        fetcher.assert_not_called()

    def test_cached_zero_is_available(self, cache):
        """Test that a cached zero is a valid count, not unavailable."""
        cache.set(NOTIFICATIONS_CACHE_KEY, "0")
        gateway = NotificationGateway(cache, MagicMock())

        assert gateway.resolve("ghp_token") == NotificationCount.of(0)

    def test_expired_entry_refetches(self, cache, clock):
        """Test that an expired count triggers a new fetch."""
        cache.set(NOTIFICATIONS_CACHE_KEY, "7")
        clock.advance(minutes=6)
        fetcher = MagicMock(return_value=["n1"])
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count("ghp_token") == 1
        fetcher.assert_called_once()
        assert cache.get(NOTIFICATIONS_CACHE_KEY) == ("1", True)

    @pytest.mark.parametrize("payload", ["not-json", "true", "1.5", "-2", '"3"'])
    def test_malformed_cached_payload_is_miss(self, cache, payload):
        """Test that a cached value that is not a count is ignored."""
        cache.set(NOTIFICATIONS_CACHE_KEY, payload)
        fetcher = MagicMock(return_value=[])
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count("ghp_token") == 0
        fetcher.assert_called_once()

    @pytest.mark.parametrize(
        "error",
        [AuthError("denied"), NetworkError("down"), RateLimitedError("slow down"), NotificationError("500")],
    )
    def test_fetch_failure_is_unavailable_and_not_cached(self, cache, cache_file, error):
        """Test that failures return -1 and leave the cache untouched."""
        fetcher = MagicMock(side_effect=error)
        gateway = NotificationGateway(cache, fetcher)

        assert gateway.count("ghp_token") == -1
        assert gateway.resolve("ghp_token").available is False
        assert not cache_file.exists()
        assert fetcher.call_count == 2

    def test_cache_write_failure_still_returns_count(self, cache, mocker):
        """Test that a failed cache write does not hide the fetched count."""
        mocker.patch.object(cache, "set", side_effect=CacheError("disk full"))
        gateway = NotificationGateway(cache, MagicMock(return_value=["n1", "n2"]))

        assert gateway.count("ghp_token") == 2

    def test_null_subject_url_is_counted_and_cached(self, cache, mocker):
        """Test that a thread without a subject URL still yields a cached count."""
        payload = [{
            "id": "9",
            "reason": "ci_activity",
            "unread": True,
            "subject": {"title": "CI run failed", "url": None, "type": "CheckSuite"},
            "repository": {"full_name": "octo/repo"},
        }]
        mocker.patch("requests.get", return_value=_response(payload=payload))
        gateway = NotificationGateway(cache, fetch_notifications)

        assert gateway.count("ghp_token") == 1
        assert cache.get(NOTIFICATIONS_CACHE_KEY) == ("1", True)

    def test_custom_cache_key(self, cache):
        """Test that the cache key is configurable."""
        gateway = NotificationGateway(cache, MagicMock(return_value=[]), cache_key="other")

        gateway.count("ghp_token")

        assert cache.get("other") == (json.dumps(0), True)
        assert cache.get(NOTIFICATIONS_CACHE_KEY) == ("", False)
