"""Classification of status entries into added, excluded and dropped.

Rules, first match wins:

1. an exclude token matches the entry: excluded
2. the include selector is EVERYTHING: added
3. an include token matches the entry: added
4. otherwise: dropped (silently left out of the commit)

A token matches when it names the entry's file or any directory above it.
"""

from typing import Iterable, Sequence, Union

from gacp.models import ClassifiedResult, StatusEntry
from gacp.paths import Token


class IncludeAll:
    """Include selector meaning "no restriction". Use the EVERYTHING instance."""

    def __repr__(self) -> str:
        return "EVERYTHING"


EVERYTHING = IncludeAll()

IncludeSelector = Union[IncludeAll, Sequence[Token]]


def matches_any(entry: StatusEntry, tokens: Iterable[Token]) -> bool:
    """Return True if any token names the entry or one of its ancestors."""
    return any(token.matches(entry) for token in tokens)


def classify(
    entries: Iterable[StatusEntry],
    include: IncludeSelector,
    exclude: Sequence[Token],
) -> ClassifiedResult:
    """Partition entries according to the include and exclude tokens.

    Exclusion takes precedence over inclusion. The relative order of the
    input is preserved in every output sequence.

    Args:
        entries: Expanded status entries.
        include: EVERYTHING, or the tokens from --files.
        exclude: Tokens from --exclude plus the auto-ignore patterns.

    Returns:
        The ClassifiedResult, with the widest added or excluded display
        path as max_display_width.
    """
    added = []
    excluded = []
    dropped = []

    for entry in entries:
        if matches_any(entry, exclude):
            excluded.append(entry)
        elif include is EVERYTHING or matches_any(entry, include):
            added.append(entry)
        else:
            dropped.append(entry)

    width = max((len(e.display_path) for e in added + excluded), default=0)

    return ClassifiedResult(
        added=tuple(added),
        excluded=tuple(excluded),
        dropped=tuple(dropped),
        max_display_width=width,
    )
