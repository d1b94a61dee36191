"""Working tree change summary.

Contains:
- change_summary: Classify the working tree and attach diff statistics
"""

import logging
from pathlib import Path
from typing import Union

from branchline.git.diff import get_diff_stat
from branchline.git.exceptions import GitError
from branchline.git.models import GitChangeSummary
from branchline.git.runner import DEFAULT_GIT_TIMEOUT
from branchline.git.status import classify_status, get_status

logger = logging.getLogger(__name__)


def change_summary(path: Union[str, Path], timeout: float = DEFAULT_GIT_TIMEOUT) -> GitChangeSummary:
    """Summarize staged and unstaged changes in a working tree.

    Never raises: if git fails, the affected part of the summary is left
    empty so the status line can still render.

    Args:
        path: Directory inside the repository.
        timeout: Seconds to wait for each git call.

    Returns:
        The change counts with staged and unstaged diff statistics.
    """
    try:
        summary = classify_status(get_status(path, timeout=timeout))
    except GitError as e:
        logger.debug("git status unavailable for %s: %s", path, e)
        return GitChangeSummary()

    try:
        summary.staged_diff_stat = get_diff_stat(path, staged=True, timeout=timeout)
        summary.unstaged_diff_stat = get_diff_stat(path, staged=False, timeout=timeout)
    except GitError as e:
        logger.debug("git diff stats unavailable for %s: %s", path, e)

    return summary
