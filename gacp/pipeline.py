"""Status-to-partition pipeline.

Each stage is a pure function of its inputs; the CLI gathers the git and
configuration state and hands it in explicitly.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from gacp.classify import EVERYTHING, classify
from gacp.expand import IgnoredFilter, build_entries
from gacp.git.exceptions import StatusParseError
from gacp.git.status import parse_status_output
from gacp.models import ClassifiedResult
from gacp.paths import parse_ignore_pattern, parse_path_token


@dataclass(frozen=True)
class CommitPlan:
    """Everything the presenter and executor need for one run."""

    result: ClassifiedResult
    skipped: tuple[StatusParseError, ...] = ()

    @property
    def paths_to_add(self) -> list[str]:
        return [entry.display_path for entry in self.result.added]


def plan_commit(
    status_output: str,
    top_level: Path,
    cwd: Path,
    files: Optional[Sequence[str]] = None,
    exclude: Sequence[str] = (),
    ignore_patterns: Sequence[str] = (),
    relative_paths: bool = False,
    ignored_filter: Optional[IgnoredFilter] = None,
) -> CommitPlan:
    """Parse, resolve, expand and classify a porcelain status listing.

    Args:
        status_output: Raw `git status --porcelain=v1` output.
        top_level: Absolute path of the repository root.
        cwd: Current working directory.
        files: Explicit --files arguments; None or empty means everything.
        exclude: Explicit --exclude arguments, relative to cwd.
        ignore_patterns: Auto-ignore patterns, relative to the top level.
        relative_paths: Display every path relative to cwd.
        ignored_filter: Drops gitignored files found inside untracked
            directories; see expand_directory.

    Returns:
        The CommitPlan for this run.
    """
    status_lines, skipped = parse_status_output(status_output)
    entries = build_entries(status_lines, top_level, cwd, relative_paths, ignored_filter)

    include = (
        [parse_path_token(f, top_level, cwd) for f in files] if files else EVERYTHING
    )
    exclude_tokens = [parse_path_token(e, top_level, cwd) for e in exclude]
    exclude_tokens += [parse_ignore_pattern(p, top_level) for p in ignore_patterns]

    result = classify(entries, include, exclude_tokens)
    return CommitPlan(result=result, skipped=tuple(skipped))
