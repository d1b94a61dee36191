"""CLI command for listing notifications."""

import typer

from branchline.cli.utils import mask_token
from branchline.config import GITHUB_TOKEN_KEY, load_config
from branchline.notifications import NotificationError, fetch_notifications


def noti_command() -> None:
    """List unread GitHub notifications you are participating in.

    Always fetches fresh data; the status line cache is not used.
    """
    config = load_config()

    typer.echo("🔔 GitHub Notifications")
    typer.echo("=======================")

    token = config.github_token
    if not token:
        typer.echo(f"❌ {GITHUB_TOKEN_KEY} not set in {config.env_file}")
        typer.echo("Please add your GitHub token to the file:")
        typer.echo(f"{GITHUB_TOKEN_KEY}=your_personal_access_token")
        return

    typer.echo(f"Token: {mask_token(token)}")

    try:
        notifications = fetch_notifications(token, timeout=config.notification_timeout)
    except NotificationError as e:
        typer.echo(f"❌ Error fetching notifications: {e}", err=True)
        raise typer.Exit(1)

    if not notifications:
        typer.echo("✅ No unread notifications")
        return

    typer.echo(f"📨 Found {len(notifications)} unread notification(s):")
    typer.echo()

    for i, notification in enumerate(notifications, start=1):
        typer.echo(f"{i}. [{notification.subject.type}] {notification.subject.title}")
        typer.echo(f"   Repository: {notification.repository.full_name}")
        typer.echo(f"   Reason: {notification.reason}")
        if notification.subject.url:
            typer.echo(f"   URL: {notification.subject.url}")
        typer.echo()
