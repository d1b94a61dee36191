"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format
- classify_status: Reduce porcelain status lines to per-stage counts
"""

from pathlib import Path
from typing import Union

from branchline.git.models import GitChangeSummary
from branchline.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command


def get_status(path: Union[str, Path], timeout: float = DEFAULT_GIT_TIMEOUT) -> str:
    """Get git status output in porcelain format.

    Leading spaces are significant in porcelain output, so only the
    trailing newline is removed.

    Returns:
        The git status output.

    Raises:
        GitError: If git fails.
    """
    output = _run_git_command(["status", "--porcelain=v1"], cwd=path, timeout=timeout, strip=False)
    return output.rstrip("\n")


def classify_status(porcelain: str) -> GitChangeSummary:
    """Count changed paths by stage from porcelain v1 status output.

    The porcelain format uses two columns:
    - First column: staged status (index)
    - Second column: worktree status

    Renames and copies in the index count as modifications. Untracked
    files (``??``) count as unstaged additions only. Worktree codes other
    than M and D are not counted.

    Args:
        porcelain: Output from git status --porcelain=v1

    Returns:
        A GitChangeSummary without diff statistics.
    """
    summary = GitChangeSummary()

    for line in porcelain.split("\n"):
        # Skip lines that are too short to hold both columns
        if len(line) < 2:
            continue

        staged_status = line[0]
        working_status = line[1]

        if staged_status == "A":
            summary.staged_added += 1
        elif staged_status == "D":
            summary.staged_deleted += 1
        elif staged_status in ("M", "R", "C"):
            summary.staged_modified += 1

        if working_status == "M":
            summary.unstaged_modified += 1
        elif working_status == "D":
            summary.unstaged_deleted += 1

        if staged_status == "?" and working_status == "?":
            summary.unstaged_added += 1

    return summary
