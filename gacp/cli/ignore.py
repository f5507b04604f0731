"""`gacp-ignore`: inspect and edit the auto-ignore patterns of a repository.

Patterns come from two places, config.yaml (editable here) and the
per-repository line file ~/.gacp/ignore/<repo-dir-name> (edited by hand).
Every command says which of the two a pattern belongs to.
"""

from pathlib import Path
from typing import NoReturn

import typer

from gacp.git import GitError, get_repo_root
from gacp.user_config import (
    UserConfigError,
    add_ignore_pattern,
    get_config_file,
    get_ignore_file,
    get_ignore_file_patterns,
    load_config,
    remove_ignore_pattern,
)

ignore_app = typer.Typer(
    name="gacp-ignore",
    help="Manage auto-ignore patterns for the current repository",
    add_completion=False,
)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _print_source(source: Path, patterns: list[str], note: str) -> None:
    typer.echo(f"{source} ({note}):")
    if not patterns:
        typer.echo("  (no patterns)")
    for pattern in patterns:
        typer.echo(f"  - {pattern}")
    typer.echo()


@ignore_app.command("list")
def ignore_list() -> None:
    """Show the auto-ignore patterns of this repository, by source file."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        _fail(str(e))

    try:
        yaml_patterns = load_config(strict=True).patterns_for(repo_root)
    except UserConfigError as e:
        # gacp itself treats an unreadable file as empty; say so here
        typer.echo(f"Warning: {e}", err=True)
        yaml_patterns = []
    file_patterns = get_ignore_file_patterns(repo_root)

    typer.echo(f"Auto-ignore patterns for {repo_root}:")
    typer.echo()
    _print_source(get_config_file(), yaml_patterns, "gacp-ignore add/remove")
    _print_source(get_ignore_file(repo_root), file_patterns, "edit by hand")

    total = len(set(yaml_patterns) | set(file_patterns))
    if total:
        typer.echo(f"Total: {total} pattern(s)")
    else:
        typer.echo("No patterns configured")


@ignore_app.command("add")
def ignore_add(
    pattern: str = typer.Argument(
        ...,
        help="Path relative to the repository root, or a glob (e.g. build, *.log)",
    ),
) -> None:
    """Add a pattern to this repository's list in config.yaml."""
    try:
        repo_root = get_repo_root()
        if pattern in get_ignore_file_patterns(repo_root):
            typer.echo(f"Pattern already listed in {get_ignore_file(repo_root)}: {pattern}")
            return
        if add_ignore_pattern(repo_root, pattern):
            typer.echo(f"Added ignore pattern: {pattern}")
        else:
            typer.echo(f"Pattern already exists: {pattern}")
    except (GitError, UserConfigError) as e:
        _fail(str(e))


@ignore_app.command("remove")
def ignore_remove(
    pattern: str = typer.Argument(
        ...,
        help="Pattern to remove from config.yaml",
    ),
) -> None:
    """Remove a pattern from this repository's list in config.yaml."""
    try:
        repo_root = get_repo_root()
        removed = remove_ignore_pattern(repo_root, pattern)
    except (GitError, UserConfigError) as e:
        _fail(str(e))

    if removed:
        typer.echo(f"Removed ignore pattern: {pattern}")
        return

    ignore_file = get_ignore_file(repo_root)
    if pattern in get_ignore_file_patterns(repo_root):
        typer.echo(
            f"Pattern {pattern!r} comes from {ignore_file}; edit that file to remove it",
            err=True,
        )
    else:
        typer.echo(f"Pattern not found: {pattern}", err=True)
    raise typer.Exit(1)
