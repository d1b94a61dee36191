"""CLI commands for inspecting and maintaining the cache file."""

import typer

from branchline.cache import CacheError, TTLCache
from branchline.config import load_config

# Subcommand group for cache maintenance
cache_app = typer.Typer(
    name="cache",
    help="Inspect and maintain the status line cache file",
    add_completion=False,
)


def _open_cache() -> TTLCache:
    config = load_config()
    return TTLCache(config.cache_file, config.cache_ttl)


@cache_app.command("show")
def cache_show() -> None:
    """Show the latest entry for each cached key."""
    cache = _open_cache()
    entries = cache.entries()

    typer.echo(f"Cache file: {cache.file_path}")
    if not entries:
        typer.echo("  (empty)")
        return

    latest = {entry.key: entry for entry in entries}
    typer.echo(f"  {len(entries)} line(s), {len(latest)} key(s)")
    typer.echo()
    for key, entry in latest.items():
        _, live = cache.get(key)
        state = "live" if live else "expired"
        typer.echo(f"  {key} = {entry.content}  [{entry.timestamp.isoformat()}, {state}]")


@cache_app.command("compact")
def cache_compact() -> None:
    """Drop superseded and expired entries from the cache file."""
    cache = _open_cache()
    try:
        removed = cache.compact()
    except CacheError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Removed {removed} line(s) from {cache.file_path}")


@cache_app.command("clear")
def cache_clear() -> None:
    """Delete the cache file."""
    cache = _open_cache()
    try:
        removed = cache.clear()
    except CacheError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo(f"✓ Deleted {cache.file_path}")
    else:
        typer.echo(f"No cache file at {cache.file_path}")
