"""Git status collection for branchline.

This package provides the git side of the status line:
- exceptions: GitError
- runner: _run_git_command, DEFAULT_GIT_TIMEOUT
- branch: is_repository, current_branch
- status: get_status, classify_status
- diff: parse_shortstat, get_diff_stat
- models: DiffStat, GitChangeSummary
- summary: change_summary
"""

# Exceptions
from branchline.git.exceptions import GitError

# Runner utilities
from branchline.git.runner import (
    DEFAULT_GIT_TIMEOUT,
    _run_git_command,
)

# Branch utilities
from branchline.git.branch import (
    current_branch,
    is_repository,
)

# Models
from branchline.git.models import (
    DiffStat,
    GitChangeSummary,
)

# Status utilities
from branchline.git.status import (
    classify_status,
    get_status,
)

# Diff utilities
from branchline.git.diff import (
    get_diff_stat,
    parse_shortstat,
)

# Summary builder
from branchline.git.summary import change_summary


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "DEFAULT_GIT_TIMEOUT",
    "_run_git_command",
    # Branch
    "current_branch",
    "is_repository",
    # Models
    "DiffStat",
    "GitChangeSummary",
    # Status
    "classify_status",
    "get_status",
    # Diff
    "get_diff_stat",
    "parse_shortstat",
    # Summary
    "change_summary",
]
