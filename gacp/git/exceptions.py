"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotARepositoryError: Raised outside of a git work tree
- StatusParseError: Raised for a status line with an unknown code
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the current directory is not inside a git work tree."""

    pass


class StatusParseError(GitError):
    """Raised when a porcelain status line cannot be interpreted."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Unrecognized status line {line!r}: {reason}")
