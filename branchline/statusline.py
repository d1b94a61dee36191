"""Status line assembly.

Contains:
- build_gateway: Create the cached notification gateway for a configuration
- resolve_notification_count: Notification count for the badge, or -1
- build_status_line: Render the status line for one input descriptor
"""

import logging
from functools import partial

from branchline.cache import TTLCache
from branchline.config import StatuslineConfig
from branchline.formatters import render_status_line, shorten_path
from branchline.git import change_summary, current_branch, is_repository
from branchline.input import StatusLineInput
from branchline.notifications import NotificationCount, NotificationGateway, fetch_notifications

logger = logging.getLogger(__name__)


def build_gateway(config: StatuslineConfig) -> NotificationGateway:
    """Create a notification gateway reading through the configured cache."""
    cache = TTLCache(config.cache_file, config.cache_ttl)
    fetcher = partial(fetch_notifications, timeout=config.notification_timeout)
    return NotificationGateway(cache, fetcher)


def resolve_notification_count(config: StatuslineConfig) -> int:
    """Get the notification count for the badge.

    Returns:
        The count, or -1 when notifications are disabled, no token is
        configured, or the lookup fails.
    """
    if not config.show_notifications:
        return NotificationCount.SENTINEL
    return build_gateway(config).count(config.github_token)


def build_status_line(data: StatusLineInput, config: StatuslineConfig) -> str:
    """Render the status line for one input descriptor.

    Git and notification failures degrade to missing segments; this never
    raises for them.

    Args:
        data: The parsed stdin descriptor.
        config: Runtime configuration.

    Returns:
        The rendered line.
    """
    current_dir = data.workspace.current_dir

    branch = ""
    changes = None
    if is_repository(current_dir, timeout=config.git_timeout):
        branch = current_branch(current_dir, timeout=config.git_timeout)
        changes = change_summary(current_dir, timeout=config.git_timeout)
    else:
        logger.debug("%s is not inside a git work tree", current_dir)

    notification_count = resolve_notification_count(config)

    path = shorten_path(current_dir, str(config.home_dir), data.project_dir)
    return render_status_line(branch, changes, notification_count, path)
