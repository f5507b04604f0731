"""Expansion of directory-shaped status entries.

`git status --porcelain` reports a brand new directory as a single
``?? newdir/`` line. The functions here replace such a line with one entry
per regular file inside the directory, so every file can be matched by
include and exclude tokens on its own.
"""

import os
import stat
from pathlib import Path
from typing import Callable, Optional

from gacp.models import StatusCode, StatusEntry, StatusLine
from gacp.paths import resolve_display_path

# Takes repo-relative paths, returns the ones to leave out
IgnoredFilter = Callable[[list[str]], set[str]]


def _is_regular_file(path: str) -> bool:
    """Regular file check that does not follow symlinks."""
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode)


def _is_nested_repository(path: str) -> bool:
    """A directory holding its own .git (directory or gitfile)."""
    return os.path.lexists(os.path.join(path, ".git"))


def make_entry(
    status: StatusCode,
    repo_path: str,
    top_level: Path,
    cwd: Path,
    relative_paths: bool = False,
) -> StatusEntry:
    """Build a StatusEntry for a path relative to the top level."""
    absolute = Path(os.path.normpath(os.path.join(top_level, repo_path)))
    return StatusEntry(
        status=status,
        absolute_path=absolute,
        repo_path=Path(repo_path).as_posix(),
        display=resolve_display_path(repo_path, top_level, cwd, relative_paths),
    )


def expand_directory(
    status: StatusCode,
    directory: str,
    top_level: Path,
    cwd: Path,
    relative_paths: bool = False,
    ignored_filter: Optional[IgnoredFilter] = None,
) -> list[StatusEntry]:
    """Enumerate every regular file below a directory as a StatusEntry.

    Directories, symlinks and special files produce no entry, and symlinked
    directories are not descended into. A directory that contains ``.git``
    is a separate repository: neither it nor anything below it is listed.
    Names are visited in sorted order. If the directory vanishes while
    being walked the result is simply shorter.

    Args:
        status: Status inherited by every file found.
        directory: The directory, relative to the top level.
        top_level: Absolute path of the repository root.
        cwd: Current working directory.
        relative_paths: Passed through to the path resolver.
        ignored_filter: Called with the repo paths found; the paths it
            returns are left out. Used to honour .gitignore.

    Returns:
        Entries for the files found, in walk order.
    """
    root = os.path.join(top_level, directory)
    entries = []

    # os.walk ignores listing errors by default, which covers the
    # directory disappearing underneath us.
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        if _is_nested_repository(dirpath):
            dirnames[:] = []
            continue
        dirnames.sort()
        for name in sorted(filenames):
            full = os.path.join(dirpath, name)
            if not _is_regular_file(full):
                continue
            repo_path = os.path.relpath(full, top_level)
            entries.append(make_entry(status, repo_path, top_level, cwd, relative_paths))

    if ignored_filter is not None and entries:
        ignored = ignored_filter([entry.repo_path for entry in entries])
        entries = [entry for entry in entries if entry.repo_path not in ignored]

    return entries


def build_entries(
    status_lines: list[StatusLine],
    top_level: Path,
    cwd: Path,
    relative_paths: bool = False,
    ignored_filter: Optional[IgnoredFilter] = None,
) -> list[StatusEntry]:
    """Turn parsed status lines into file entries, expanding directories.

    A directory line is replaced in place by the files it contains, so the
    result keeps the order of the status listing. A directory line whose
    directory no longer exists yields nothing. Lines git printed itself are
    never passed to ``ignored_filter``; git does not list ignored paths.

    Args:
        status_lines: Parsed porcelain lines.
        top_level: Absolute path of the repository root.
        cwd: Current working directory.
        relative_paths: Passed through to the path resolver.
        ignored_filter: Passed through to expand_directory.

    Returns:
        One StatusEntry per file.
    """
    entries = []
    for line in status_lines:
        if line.is_directory:
            full = os.path.join(top_level, line.path)
            if os.path.isdir(full) and not os.path.islink(full):
                entries.extend(
                    expand_directory(
                        line.status,
                        line.path,
                        top_level,
                        cwd,
                        relative_paths,
                        ignored_filter,
                    )
                )
            continue
        entries.append(make_entry(line.status, line.path, top_level, cwd, relative_paths))
    return entries
