"""Repository detection and branch utilities.

Contains:
- is_repository: Check whether a directory is inside a git working tree
- current_branch: Get the current branch name, or the short HEAD hash when detached
"""

from pathlib import Path
from typing import Union

from branchline.git.exceptions import GitError
from branchline.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command


def is_repository(path: Union[str, Path], timeout: float = DEFAULT_GIT_TIMEOUT) -> bool:
    """Check whether a directory is inside a git working tree.

    Args:
        path: Directory to check.
        timeout: Seconds to wait for git.

    Returns:
        True if git reports the path is inside a work tree. Any failure,
        including git being missing, yields False.
    """
    if not str(path):
        return False
    try:
        output = _run_git_command(["rev-parse", "--is-inside-work-tree"], cwd=path, timeout=timeout)
    except GitError:
        return False
    return output == "true"


def current_branch(path: Union[str, Path], timeout: float = DEFAULT_GIT_TIMEOUT) -> str:
    """Get the current branch name.

    Args:
        path: Directory inside the repository.
        timeout: Seconds to wait for each git call.

    Returns:
        The short branch name. In detached HEAD state, the short commit hash.
        An empty string if neither resolves (e.g. an unborn repository).
    """
    try:
        return _run_git_command(["symbolic-ref", "--short", "HEAD"], cwd=path, timeout=timeout)
    except GitError:
        pass

    try:
        return _run_git_command(["rev-parse", "--short", "HEAD"], cwd=path, timeout=timeout)
    except GitError:
        return ""
