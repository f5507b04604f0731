"""Main CLI command: add, commit and push in one go."""

from functools import partial
from pathlib import Path
from typing import List, Optional

import typer

from gacp import __version__
from gacp.git import (
    GitError,
    get_ignored_paths,
    get_repo_root,
    get_status,
    is_inside_work_tree,
    preview_actions,
    run_actions,
    show_status,
)
from gacp.pipeline import plan_commit
from gacp.user_config import load_ignore_patterns
from gacp.cli.utils import print_classification


DEFAULT_MESSAGE = "updated README"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gacp {__version__}")
        raise typer.Exit()


def main_command(
    message: str = typer.Argument(
        DEFAULT_MESSAGE,
        help="Commit message",
    ),
    dry: bool = typer.Option(
        False,
        "--dry",
        "-d",
        help="Dry-run (show what will happen)",
    ),
    list_only: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Only list the files that would be added and excluded",
    ),
    relative_paths: bool = typer.Option(
        False,
        "--relative-paths",
        "-r",
        help="Show paths relative to the current directory, even above it",
    ),
    no_ignore: bool = typer.Option(
        False,
        "--no-ignore",
        "-i",
        help="Do not apply the auto-ignore patterns from ~/.gacp",
    ),
    no_push: bool = typer.Option(
        False,
        "--no-push",
        "-P",
        help="Commit without pushing",
    ),
    files: Optional[List[str]] = typer.Option(
        None,
        "--files",
        "-f",
        help="Files to add (git add) [default: everything]; repeatable",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Files or directories to exclude (not to add); repeatable",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """git add, commit and push in one go.

    \b
    Examples:
        gacp "First Commit"
        gacp "updated README" -f README.md
        gacp "Pushing all except new-file.py" -e new-file.py
    """
    if not is_inside_work_tree():
        typer.echo("Not in a git repository", err=True)
        raise typer.Exit(1)

    try:
        top_level = get_repo_root()
        status_output = get_status()

        # Nothing to commit: let git say so in its own words
        if not status_output.strip():
            show_status()
            raise typer.Exit(0)

        plan = plan_commit(
            status_output,
            top_level=top_level,
            cwd=Path.cwd(),
            files=files,
            exclude=exclude or [],
            ignore_patterns=load_ignore_patterns(top_level, no_ignore),
            relative_paths=relative_paths,
            ignored_filter=partial(get_ignored_paths, top_level),
        )

        for skipped in plan.skipped:
            typer.echo(f"Warning: {skipped}", err=True)

        result = plan.result
        print_classification(result)

        if not result.added:
            typer.echo("Nothing added")
            raise typer.Exit(0)

        if list_only:
            return

        if dry:
            for line in preview_actions(plan.paths_to_add, message, push=not no_push):
                typer.echo(line)
            return

        returncode = run_actions(plan.paths_to_add, message, push=not no_push)
        if returncode != 0:
            raise typer.Exit(returncode)

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
