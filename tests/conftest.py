"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


class FakeClock:
    """Settable clock for TTL tests."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock():
    """Clock fixed at a known UTC instant."""
    return FakeClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def cache_file(temp_dir):
    """Path for a cache file that does not exist yet."""
    return temp_dir / ".statusline_cache"


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-C", str(repo), "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_repo(temp_dir):
    """Create a real git repository with one commit on branch 'main'."""
    repo = temp_dir / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    (repo / "README.md").write_text("hello\n")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "Initial commit")
    return repo


@pytest.fixture
def run_git():
    """Run a git command in a repository with a test identity."""
    return _git


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def sample_notifications_payload():
    """Sample GitHub notifications API payload."""
    return [
        {
            "id": "1",
            "reason": "review_requested",
            "unread": True,
            "subject": {
                "title": "Add status line cache",
                "url": "https://api.github.com/repos/octo/repo/pulls/1",
                "type": "PullRequest",
            },
            "repository": {"full_name": "octo/repo"},
        },
        {
            "id": "2",
            "reason": "mention",
            "unread": True,
            "subject": {"title": "Crash on empty input", "url": "", "type": "Issue"},
            "repository": {"full_name": "octo/other"},
        },
    ]
