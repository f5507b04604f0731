"""Data models for gacp.

Contains:
- StatusCode: Kind of change reported by git status
- PathAnchor: Whether a display path is rooted at the cwd or the top level
- DisplayPath: A path as shown to the user and passed to git
- StatusLine: One parsed line of porcelain status output
- StatusEntry: One regular file under version control attention
- ClassifiedResult: Partition of entries into added/excluded/dropped
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# Git's top-level pathspec magic (":/"), terminated by ":" so the
# remainder is never read as further magic.
ESCAPE_MARKER = ":/:"


class StatusCode(Enum):
    """Kinds of change gacp knows how to stage."""

    UNTRACKED = "??"
    MODIFIED = "M"
    DELETED = "D"
    STAGED = "A"

    @property
    def label(self) -> str:
        """Short human label shown next to a file."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    StatusCode.UNTRACKED: "new",
    StatusCode.MODIFIED: "modified",
    StatusCode.DELETED: "deleted",
    StatusCode.STAGED: "staged",
}


class PathAnchor(Enum):
    """Directory a display path is relative to."""

    CWD = "cwd"
    TOP_LEVEL = "top-level"


@dataclass(frozen=True)
class DisplayPath:
    """A path relative to either the working directory or the top level."""

    anchor: PathAnchor
    path: str  # posix separators, never starts with "/"

    def render(self) -> str:
        """Return the display string, also usable as a git pathspec."""
        if self.anchor is PathAnchor.TOP_LEVEL:
            return ESCAPE_MARKER + self.path
        return self.path

    def to_absolute(self, top_level: Path, cwd: Path) -> Path:
        """Convert back to a normalized absolute path."""
        base = top_level if self.anchor is PathAnchor.TOP_LEVEL else cwd
        return Path(os.path.normpath(base / self.path))

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class StatusLine:
    """One line of `git status --porcelain` after parsing."""

    status: StatusCode
    path: str  # relative to the top level, unquoted, no trailing slash
    is_directory: bool = False


@dataclass(frozen=True)
class StatusEntry:
    """A single regular file reported (or synthesized) from git status."""

    status: StatusCode
    absolute_path: Path
    repo_path: str
    display: DisplayPath

    @property
    def display_path(self) -> str:
        return self.display.render()


@dataclass(frozen=True)
class ClassifiedResult:
    """Entries partitioned by the classifier, in input order."""

    added: tuple[StatusEntry, ...] = ()
    excluded: tuple[StatusEntry, ...] = ()
    dropped: tuple[StatusEntry, ...] = ()
    max_display_width: int = 0
