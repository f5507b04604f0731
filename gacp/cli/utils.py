"""Shared output helpers for CLI commands."""

from typing import Optional

import typer

from gacp.models import ClassifiedResult, StatusCode, StatusEntry


STATUS_COLORS = {
    StatusCode.UNTRACKED: typer.colors.BRIGHT_CYAN,
    StatusCode.MODIFIED: typer.colors.BRIGHT_GREEN,
    StatusCode.DELETED: typer.colors.BRIGHT_RED,
    StatusCode.STAGED: typer.colors.BRIGHT_BLUE,
}
EXCLUDED_COLOR = typer.colors.YELLOW

# Minimum name column width, as in the classic "%-40s" listing
MIN_NAME_WIDTH = 40


def format_file_line(entry: StatusEntry, width: int, color: Optional[str] = None) -> str:
    """Format one file for the listing.

    Args:
        entry: The entry to show.
        width: Width of the name column.
        color: Override colour (used for excluded files).

    Returns:
        A tab-indented, coloured line such as ``src/app.py   (modified)``.
    """
    color = color or STATUS_COLORS[entry.status]
    name = entry.display_path.ljust(width)
    return "\t" + typer.style(f"{name} ({entry.status.label})", fg=color)


def print_classification(result: ClassifiedResult) -> None:
    """Print the added and excluded files, aligned on one column.

    Args:
        result: The classifier output.
    """
    width = max(result.max_display_width, MIN_NAME_WIDTH)

    if result.added:
        typer.echo("Added files:")
        for entry in result.added:
            typer.echo(format_file_line(entry, width))
        typer.echo()

    if result.excluded:
        typer.echo("Excluded files:")
        for entry in result.excluded:
            typer.echo(format_file_line(entry, width, EXCLUDED_COLOR))
        typer.echo()
