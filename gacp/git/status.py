"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format
- parse_status_line: Parse a single porcelain v1 line
- parse_status_output: Parse full porcelain output, flagging unknown lines
- unquote_path: Undo git's C-style path quoting
- show_status: Print the human readable git status
"""

import re
import subprocess

from gacp.git.exceptions import StatusParseError
from gacp.git.runner import _run_git_command
from gacp.models import StatusCode, StatusLine


# Index/worktree column letters, in order of precedence
_DELETED_CODES = {"D"}
_STAGED_CODES = {"A", "R", "C"}
_MODIFIED_CODES = {"M", "T"}

_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "f": b"\f",
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "v": b"\v",
    "\\": b"\\",
    '"': b'"',
}

_ESCAPE_RE = re.compile(r'\\([0-7]{3}|.)')


def get_status() -> str:
    """Get git status output in porcelain format.

    Paths in porcelain v1 output are always relative to the top level.

    Returns:
        The raw git status output.
    """
    return _run_git_command(["status", "--porcelain=v1"], strip=False)


def unquote_path(path: str) -> str:
    """Undo the C-style quoting git applies to unusual path names.

    Args:
        path: The path as printed by git, possibly wrapped in double quotes.

    Returns:
        The literal path.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    inner = path[1:-1]
    out = bytearray()
    pos = 0
    for match in _ESCAPE_RE.finditer(inner):
        out += inner[pos:match.start()].encode("utf-8")
        seq = match.group(1)
        if len(seq) == 3:
            # Octal escapes are raw bytes of a UTF-8 sequence
            out.append(int(seq, 8) & 0xFF)
        else:
            out += _ESCAPES.get(seq, seq.encode("utf-8"))
        pos = match.end()
    out += inner[pos:].encode("utf-8")
    return out.decode("utf-8", errors="surrogateescape")


def _status_from_code(code: str, line: str) -> StatusCode:
    if code == "??":
        return StatusCode.UNTRACKED

    columns = set(code) - {" "}
    if not columns:
        raise StatusParseError(line, "empty status code")
    unknown = columns - _DELETED_CODES - _STAGED_CODES - _MODIFIED_CODES
    if unknown:
        raise StatusParseError(line, f"unsupported status code {code.strip()!r}")

    if columns & _DELETED_CODES:
        return StatusCode.DELETED
    if columns & _STAGED_CODES:
        return StatusCode.STAGED
    return StatusCode.MODIFIED


def parse_status_line(line: str) -> StatusLine:
    """Parse one `git status --porcelain=v1` line.

    The line is ``<code><space(s)><path>``. Git's own two-column ``XY PATH``
    form (X is the index column, Y the worktree column) is read by position;
    anything else, such as ``M mod.txt``, is split on the first run of
    whitespace. Renames and copies (``XY OLD -> NEW``) keep NEW.

    Args:
        line: A single status line without its newline.

    Returns:
        The parsed StatusLine.

    Raises:
        StatusParseError: If the code is unsupported or the line malformed.
    """
    if len(line) >= 4 and line[2] == " ":
        code, raw_path = line[:2], line[3:]
    else:
        parts = line.split(None, 1)
        if len(parts) < 2:
            raise StatusParseError(line, "expected '<code> <path>'")
        code, raw_path = parts
        if len(code) > 2:
            raise StatusParseError(line, f"unsupported status code {code!r}")

    status = _status_from_code(code, line)

    if set(code) & {"R", "C"} and " -> " in raw_path:
        raw_path = raw_path.split(" -> ", 1)[1]

    path = unquote_path(raw_path.strip())
    is_directory = path.endswith("/")
    path = path.rstrip("/")
    if not path:
        raise StatusParseError(line, "missing path")

    return StatusLine(status=status, path=path, is_directory=is_directory)


def parse_status_output(output: str) -> tuple[list[StatusLine], list[StatusParseError]]:
    """Parse full porcelain output.

    Blank lines and branch headers (``##``) are ignored. Lines that cannot
    be interpreted are collected instead of aborting the parse.

    Args:
        output: Raw `git status --porcelain=v1` output.

    Returns:
        A tuple of (parsed lines in order, errors for skipped lines).
    """
    parsed: list[StatusLine] = []
    skipped: list[StatusParseError] = []

    for line in output.splitlines():
        if not line.strip() or line.startswith("##"):
            continue
        try:
            parsed.append(parse_status_line(line))
        except StatusParseError as e:
            skipped.append(e)

    return parsed, skipped


def show_status() -> None:
    """Print plain `git status` straight to the terminal."""
    subprocess.run(["git", "status"], check=False)
