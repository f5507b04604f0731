"""The stage, commit and push sequence.

Contains:
- build_commands: The git invocations for a commit
- preview_actions: Shell-style rendering of those commands for --dry
- run_actions: Run them in order, stopping at the first failure
"""

import shlex
import subprocess

from gacp.git.exceptions import GitError


def build_commands(paths: list[str], message: str, push: bool = True) -> list[list[str]]:
    """Build the git commands that stage, commit and push.

    Args:
        paths: Pathspecs to stage (display paths of the added files).
        message: Commit message.
        push: Whether to finish with `git push`.

    Returns:
        Argument lists, in execution order.
    """
    commands = [
        ["git", "add", "--"] + list(paths),
        ["git", "commit", "-m", message],
    ]
    if push:
        commands.append(["git", "push"])
    return commands


def preview_actions(paths: list[str], message: str, push: bool = True) -> list[str]:
    """Render the commands as they would be typed in a shell."""
    return [shlex.join(cmd) for cmd in build_commands(paths, message, push)]


def run_actions(paths: list[str], message: str, push: bool = True) -> int:
    """Stage, commit and push, strictly in sequence.

    Output is not captured, so git reports its own errors. Nothing is
    rolled back when a later step fails.

    Args:
        paths: Pathspecs to stage.
        message: Commit message.
        push: Whether to push after committing.

    Returns:
        0 on success, otherwise the exit status of the failing command.

    Raises:
        GitError: If git cannot be executed at all.
    """
    for cmd in build_commands(paths, message, push):
        try:
            result = subprocess.run(cmd, check=False)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH.")
        if result.returncode != 0:
            return result.returncode
    return 0
