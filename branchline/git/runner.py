"""Git command runner.

Contains:
- _run_git_command: Run a git command against a directory and return its output
- DEFAULT_GIT_TIMEOUT: Upper bound in seconds for a single git invocation
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from branchline.git.exceptions import GitError


# The status line is rendered on every prompt, so git must never hang it
DEFAULT_GIT_TIMEOUT = 5.0


def _run_git_command(
    args: list[str],
    cwd: Optional[Union[str, Path]] = None,
    timeout: float = DEFAULT_GIT_TIMEOUT,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git against (passed as ``git -C <cwd>``).
        timeout: Seconds to wait before giving up on the command.
        strip: Strip surrounding whitespace. Column-sensitive output such as
            porcelain status must pass False.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails, times out, or git is not installed.
    """
    command = ["git"]
    if cwd is not None:
        command += ["-C", str(cwd)]
    command += args

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except subprocess.TimeoutExpired:
        raise GitError(f"Git command timed out after {timeout}s: git {' '.join(args)}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
