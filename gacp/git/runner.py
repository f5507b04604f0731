"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- is_inside_work_tree: Check whether the cwd is inside a git work tree
- get_repo_root: Get the root directory of the current git repository
- get_ignored_paths: Ask git which paths its ignore rules exclude
"""

import subprocess
from pathlib import Path
from typing import Iterable, Optional

from gacp.git.exceptions import GitError, NotARepositoryError


def _run_git_command(
    args: list[str],
    strip: bool = True,
    input: Optional[str] = None,
    ok_returncodes: tuple[int, ...] = (0,),
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from the output. Porcelain
            output must keep its leading status columns, so callers
            parsing it pass False.
        input: Text fed to the command's stdin.
        ok_returncodes: Exit statuses that are not failures. Some plumbing
            commands (check-ignore) exit 1 for "no match".

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            input=input,
            check=True,
        )
        output = result.stdout
    except subprocess.CalledProcessError as e:
        if e.returncode not in ok_returncodes:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
        output = e.stdout or ""
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return output.strip() if strip else output


def is_inside_work_tree() -> bool:
    """Return True if the current directory is inside a git work tree."""
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except GitError:
        return False


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise NotARepositoryError("Not in a git repository")


def get_ignored_paths(top_level: Path, repo_paths: Iterable[str]) -> set[str]:
    """Return the subset of paths that the repository's ignore rules exclude.

    Runs `git check-ignore --stdin -z` from the top level, so .gitignore
    files, .git/info/exclude and core.excludesFile all apply.

    Args:
        top_level: Absolute path of the repository root.
        repo_paths: Paths relative to the top level.

    Returns:
        The ignored paths, spelled as given.

    Raises:
        GitError: If git fails for a reason other than "nothing ignored".
    """
    repo_paths = list(repo_paths)
    if not repo_paths:
        return set()

    output = _run_git_command(
        ["-C", str(top_level), "check-ignore", "--stdin", "-z"],
        strip=False,
        input="".join(path + "\0" for path in repo_paths),
        ok_returncodes=(0, 1),
    )
    return {path for path in output.split("\0") if path}
