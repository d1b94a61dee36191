"""Status line formatting and rendering."""

from typing import Optional

from branchline.git import DiffStat, GitChangeSummary


RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"

NOTIFICATION_ICON = "🔔"


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def shorten_path(current_dir: str, home_dir: str, project_dir: str) -> str:
    """Abbreviate the working directory for display.

    Paths strictly under the home directory get a ``~`` prefix. Paths
    strictly under the project directory are shown relative to it, which
    takes precedence. A path equal to either directory is left as is by
    that rule.

    Args:
        current_dir: The working directory.
        home_dir: The user's home directory.
        project_dir: The project directory; "" or "null" means unset.

    Returns:
        The shortened path.

    Example:
        shorten_path("/Users/john/src", "/Users/john", "") -> "~/src"
        shorten_path("/work/proj/sub", "/Users/john", "/work/proj") -> "sub"
    """
    short = current_dir

    if home_dir and current_dir != home_dir and current_dir.startswith(home_dir + "/"):
        short = "~" + current_dir[len(home_dir):]

    if project_dir and project_dir != "null" and current_dir != project_dir:
        if current_dir.startswith(project_dir + "/"):
            short = current_dir[len(project_dir) + 1:]

    return short


def format_diff_stat(stat: Optional[DiffStat]) -> str:
    """Render diff statistics as ``(Nf+I-D)``.

    The parentheses are only drawn when a file count is present. Zero and
    missing values are omitted.
    """
    if stat is None:
        return ""

    parts = []
    if stat.files_changed:
        parts.append("(" + colorize(f"{stat.files_changed}f", CYAN))
    if stat.insertions:
        parts.append(colorize(f"+{stat.insertions}", GREEN))
    if stat.deletions:
        parts.append(colorize(f"-{stat.deletions}", RED))

    if not parts:
        return ""

    result = "".join(parts)
    if stat.files_changed:
        result += ")"
    return result


def _format_counts(added: int, modified: int, deleted: int, colors: tuple[str, str, str]) -> str:
    add_color, mod_color, del_color = colors
    parts = []
    if added:
        parts.append(colorize(f"+{added}", add_color))
    if modified:
        parts.append(colorize(f"~{modified}", mod_color))
    if deleted:
        parts.append(colorize(f"-{deleted}", del_color))
    return "".join(parts)


def format_staged(summary: GitChangeSummary) -> str:
    """Render the staged counts and diff stat, or "" if nothing is staged."""
    if not summary.has_staged_changes:
        return ""
    counts = _format_counts(
        summary.staged_added,
        summary.staged_modified,
        summary.staged_deleted,
        (GREEN, YELLOW, RED),
    )
    return counts + format_diff_stat(summary.staged_diff_stat)


def format_unstaged(summary: GitChangeSummary) -> str:
    """Render the unstaged counts and diff stat, or "" if the worktree is clean."""
    if not summary.has_unstaged_changes:
        return ""
    counts = _format_counts(
        summary.unstaged_added,
        summary.unstaged_modified,
        summary.unstaged_deleted,
        (BRIGHT_GREEN, BRIGHT_YELLOW, BRIGHT_RED),
    )
    return counts + format_diff_stat(summary.unstaged_diff_stat)


def format_change_summary(summary: GitChangeSummary) -> str:
    """Render the staged and unstaged groups separated by a space."""
    groups = [format_staged(summary), format_unstaged(summary)]
    return " ".join(group for group in groups if group)


def format_notification_badge(count: int) -> str:
    """Render the notification badge.

    Both zero and the -1 "unavailable" sentinel render nothing.
    """
    if count <= 0:
        return ""
    return colorize(f"{NOTIFICATION_ICON}{count}", RED)


def render_status_line(
    branch: str,
    changes: Optional[GitChangeSummary],
    notification_count: int,
    path: str,
) -> str:
    """Assemble the full status line.

    Segments appear in the order badge, branch, staged, unstaged, path.
    Empty segments are dropped rather than rendered as blanks.

    Args:
        branch: Current branch name, "" outside a repository.
        changes: Change summary, None outside a repository.
        notification_count: Notification count, or -1 when unavailable.
        path: The already shortened working directory.

    Returns:
        The rendered line without a trailing newline.
    """
    segments = [format_notification_badge(notification_count)]
    if branch:
        segments.append(colorize(branch, CYAN))
    if changes is not None:
        segments.append(format_staged(changes))
        segments.append(format_unstaged(changes))
    if path:
        segments.append(colorize(path, MAGENTA))

    return " ".join(segment for segment in segments if segment)
