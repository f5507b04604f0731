"""Path resolution for gacp.

Maps repository-relative paths to display paths, and normalizes user
supplied tokens and configured ignore patterns so they can be compared
against status entries.

Tokens are always compared as normalized absolute paths, whichever form
the user typed them in (cwd relative, top-level relative with the escape
marker, or absolute).
"""

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Union

from gacp.models import ESCAPE_MARKER, DisplayPath, PathAnchor, StatusEntry


# Git's short top-level magic without the terminating colon
_SHORT_MARKER = ":/"

_GLOB_CHARS = set("*?[")


def _to_posix(path: str) -> str:
    return Path(path).as_posix()


def _escapes_cwd(relative: str) -> bool:
    return relative == os.pardir or relative.startswith(os.pardir + os.sep)


def resolve_display_path(
    raw_repo_path: str,
    top_level: Path,
    cwd: Path,
    relative_paths: bool = False,
) -> DisplayPath:
    """Compute the display path for a path relative to the top level.

    Args:
        raw_repo_path: Path relative to the repository top level.
        top_level: Absolute path of the repository root.
        cwd: Current working directory.
        relative_paths: Always answer relative to cwd, even if that needs
            ``..`` segments.

    Returns:
        A cwd-anchored DisplayPath when the file lies under cwd (or in
        relative_paths mode), otherwise a top-level-anchored one.
    """
    absolute = os.path.normpath(os.path.join(top_level, raw_repo_path))
    relative = os.path.relpath(absolute, cwd)

    if relative_paths or not _escapes_cwd(relative):
        return DisplayPath(PathAnchor.CWD, _to_posix(relative))

    from_top = os.path.relpath(absolute, top_level)
    return DisplayPath(PathAnchor.TOP_LEVEL, _to_posix(from_top))


def is_under(path: Path, ancestor: Path) -> bool:
    """Return True if path equals ancestor or lies below it.

    Comparison is on whole path segments: ``dir`` contains ``dir/x`` but
    not ``dir2/x``.
    """
    path_str = os.fspath(path)
    ancestor_str = os.fspath(ancestor)
    if path_str == ancestor_str:
        return True
    prefix = ancestor_str if ancestor_str.endswith(os.sep) else ancestor_str + os.sep
    return path_str.startswith(prefix)


@dataclass(frozen=True)
class PathToken:
    """A file or directory given as an include/exclude criterion."""

    raw: str
    absolute: Path

    def matches(self, entry: StatusEntry) -> bool:
        return is_under(entry.absolute_path, self.absolute)


@dataclass(frozen=True)
class GlobToken:
    """An ignore pattern containing shell wildcards."""

    raw: str
    pattern: str

    def matches(self, entry: StatusEntry) -> bool:
        if fnmatch.fnmatch(entry.repo_path, self.pattern):
            return True
        return fnmatch.fnmatch(PurePosixPath(entry.repo_path).name, self.pattern)


Token = Union[PathToken, GlobToken]


def _split_marker(raw: str) -> tuple[bool, str]:
    """Strip a top-level marker, returning (was_top_level, remainder)."""
    for marker in (ESCAPE_MARKER, _SHORT_MARKER):
        if raw.startswith(marker):
            return True, raw[len(marker):]
    return False, raw


def _normalize(raw: str, base: Path, top_level: Path) -> Path:
    from_top, remainder = _split_marker(raw)
    if from_top:
        return Path(os.path.normpath(os.path.join(top_level, remainder)))
    expanded = os.path.expanduser(remainder)
    if os.path.isabs(expanded):
        return Path(os.path.normpath(expanded))
    return Path(os.path.normpath(os.path.join(base, expanded)))


def parse_path_token(raw: str, top_level: Path, cwd: Path) -> PathToken:
    """Normalize a user supplied --files/--exclude argument.

    Args:
        raw: The argument as typed, e.g. ``src/``, ``../README.md`` or
            ``:/:docs``.
        top_level: Absolute path of the repository root.
        cwd: Current working directory.

    Returns:
        A PathToken holding the normalized absolute path.
    """
    return PathToken(raw=raw, absolute=_normalize(raw, cwd, top_level))


def parse_ignore_pattern(raw: str, top_level: Path) -> Token:
    """Normalize a configured ignore pattern.

    Plain patterns are anchored at the top level, since ignore
    configuration is per repository and not per working directory.
    Patterns containing ``*``, ``?`` or ``[`` are matched as globs against
    the repository-relative path and the file name.
    """
    _, remainder = _split_marker(raw)
    if _GLOB_CHARS & set(remainder):
        return GlobToken(raw=raw, pattern=remainder.rstrip("/"))
    return PathToken(raw=raw, absolute=_normalize(raw, top_level, top_level))
