"""Utility functions for CLI commands.

Contains:
- configure_logging: Send log records to stderr at the requested verbosity
- mask_token: Hide most of a credential for display
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure logging to stderr.

    Stdout carries the status line itself, so log output never goes there.
    Does nothing if the root logger already has handlers.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def mask_token(token: str) -> str:
    """Mask a token, keeping the first 8 and last 4 characters."""
    return token[:8] + "..." + token[-4:] if len(token) > 12 else "***"
