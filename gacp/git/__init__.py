"""Git access for gacp.

This package provides:
- exceptions: GitError, NotARepositoryError, StatusParseError
- runner: _run_git_command, is_inside_work_tree, get_repo_root,
          get_ignored_paths
- status: get_status, parse_status_line, parse_status_output, show_status,
          unquote_path
- actions: build_commands, preview_actions, run_actions
"""

# Exceptions
from gacp.git.exceptions import (
    GitError,
    NotARepositoryError,
    StatusParseError,
)

# Runner utilities
from gacp.git.runner import (
    _run_git_command,
    is_inside_work_tree,
    get_repo_root,
    get_ignored_paths,
)

# Status utilities
from gacp.git.status import (
    get_status,
    parse_status_line,
    parse_status_output,
    show_status,
    unquote_path,
)

# Stage/commit/push
from gacp.git.actions import (
    build_commands,
    preview_actions,
    run_actions,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "StatusParseError",
    # Runner
    "_run_git_command",
    "is_inside_work_tree",
    "get_repo_root",
    "get_ignored_paths",
    # Status
    "get_status",
    "parse_status_line",
    "parse_status_output",
    "show_status",
    "unquote_path",
    # Actions
    "build_commands",
    "preview_actions",
    "run_actions",
]
