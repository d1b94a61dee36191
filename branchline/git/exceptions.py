"""Git-related exception classes.

Contains:
- GitError: Raised when a git invocation fails, times out, or git is missing
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass
