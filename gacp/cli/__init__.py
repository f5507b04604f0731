"""CLI entry points for gacp.

- app: the `gacp` command
- ignore_app: the `gacp-ignore` command group
"""

import typer

from gacp.cli.ignore import ignore_app
from gacp.cli.main import main_command

# Main application
app = typer.Typer(
    name="gacp",
    help="gacp: git add, commit and push in one go",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "ignore_app",
    "main_command",
]
