"""Shell prompt status line renderer."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("branchline")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
