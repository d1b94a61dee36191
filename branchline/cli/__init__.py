"""CLI entry point for branchline.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from branchline.cli.cache import cache_app
from branchline.cli.main import main_command
from branchline.cli.noti import noti_command

# Main application
app = typer.Typer(
    name="branchline",
    help="branchline: git and notification status line for shell prompts",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(cache_app, name="cache")

# Add individual commands
app.command("noti")(noti_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "cache_app",
    "main_command",
    "noti_command",
]
