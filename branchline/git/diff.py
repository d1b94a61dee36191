"""Git diff statistics.

Contains:
- parse_shortstat: Parse a ``git diff --shortstat`` summary line
- get_diff_stat: Get staged or unstaged diff statistics for a repository
"""

import re
from pathlib import Path
from typing import Optional, Union

from branchline.git.models import DiffStat
from branchline.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command


# One clause of a shortstat line, e.g. "3 files changed" or "1 insertion(+)"
_CLAUSE_PATTERN = re.compile(r"^\s*(\d+)\s+(file|insertion|deletion)")

_CLAUSE_FIELDS = {
    "file": "files_changed",
    "insertion": "insertions",
    "deletion": "deletions",
}


def parse_shortstat(stat_line: str) -> Optional[DiffStat]:
    """Parse a shortstat summary line.

    Example input:
        2 files changed, 150 insertions(+), 50 deletions(-)

    Any clause may be missing, e.g. "1 file changed, 3 deletions(-)";
    missing clauses are left as None. Unrecognized clauses are ignored.

    Args:
        stat_line: The summary line printed by git diff --shortstat.

    Returns:
        The parsed DiffStat, or None if the line is empty or has no
        recognizable clause.
    """
    stat_line = stat_line.strip()
    if not stat_line:
        return None

    values = {}
    for clause in stat_line.split(","):
        match = _CLAUSE_PATTERN.match(clause)
        if match:
            values[_CLAUSE_FIELDS[match.group(2)]] = int(match.group(1))

    if not values:
        return None
    return DiffStat(**values)


def get_diff_stat(
    path: Union[str, Path],
    staged: bool,
    timeout: float = DEFAULT_GIT_TIMEOUT,
) -> Optional[DiffStat]:
    """Get aggregate diff statistics for the index or the worktree.

    Args:
        path: Directory inside the repository.
        staged: Compare the index to HEAD when True, the worktree to the index otherwise.
        timeout: Seconds to wait for git.

    Returns:
        The parsed DiffStat, or None when there is no diff.

    Raises:
        GitError: If git fails.
    """
    args = ["diff", "--cached", "--shortstat"] if staged else ["diff", "--shortstat"]
    return parse_shortstat(_run_git_command(args, cwd=path, timeout=timeout))
