"""git add, commit and push in one go."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gacp")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
