"""Main CLI command for rendering the status line."""

import sys

import typer

from branchline import __version__
from branchline.cli.utils import configure_logging
from branchline.config import load_config
from branchline.input import InputError, parse_input
from branchline.statusline import build_status_line


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Write debug logging to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Render the status line from the JSON descriptor on stdin."""
    if version:
        typer.echo(f"branchline {__version__}")
        raise typer.Exit()

    configure_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        raw = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error reading stdin: {e}", err=True)
        raise typer.Exit(1)

    try:
        data = parse_input(raw)
    except InputError as e:
        typer.echo(f"Error parsing JSON: {e}", err=True)
        raise typer.Exit(1)

    config = load_config()
    typer.echo(build_status_line(data, config), nl=False)
