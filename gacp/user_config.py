"""Auto-ignore configuration for gacp.

Handles the per-repository ignore patterns stored under ~/.gacp/:
- config.yaml: ``repositories`` maps a repository's absolute top-level path
  to a list of patterns
- ignore/<repo-dir-name>: one pattern per line, ``#`` starts a comment

Both layouts are normalized into a single IgnoreConfig. Missing or broken
configuration never stops a commit; it just means nothing is auto-ignored.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator


class UserConfigError(Exception):
    """Raised when the ignore configuration cannot be written."""
    pass


_CONFIG_DIR = Path.home() / ".gacp"


class IgnoreConfig(BaseModel):
    """Repository top-level path to auto-ignore patterns."""

    repositories: dict[str, list[str]] = {}

    @field_validator("repositories", mode="before")
    @classmethod
    def drop_empty_entries(cls, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        cleaned = {}
        for repo, patterns in value.items():
            if patterns is None:
                patterns = []
            elif isinstance(patterns, str):
                patterns = patterns.split(",")
            cleaned[_repo_key(repo)] = [str(p).strip() for p in patterns if str(p).strip()]
        return cleaned

    def patterns_for(self, top_level: Path) -> list[str]:
        return list(self.repositories.get(_repo_key(top_level), []))


def _repo_key(top_level) -> str:
    return os.path.normpath(str(top_level))


def get_config_dir() -> Path:
    """Get the gacp configuration directory.

    Returns:
        Path to ~/.gacp/
    """
    return _CONFIG_DIR


def get_config_file() -> Path:
    """Return path to the config.yaml file."""
    return get_config_dir() / "config.yaml"


def get_ignore_file(top_level: Path) -> Path:
    """Return path to the line-based ignore file for a repository.

    Args:
        top_level: The root directory of the git repository.

    Returns:
        Path to ~/.gacp/ignore/<repo-dir-name>.
    """
    return get_config_dir() / "ignore" / Path(top_level).name


def parse_ignore_lines(text: str) -> list[str]:
    """Parse the line-based ignore format.

    Args:
        text: File contents.

    Returns:
        Patterns in file order with comments and blank lines removed.
    """
    patterns = []
    for line in text.splitlines():
        pattern = line.split("#", 1)[0].strip()
        if pattern:
            patterns.append(pattern)
    return patterns


def load_config(strict: bool = False) -> IgnoreConfig:
    """Load the YAML mapping from ~/.gacp/config.yaml.

    Args:
        strict: Raise instead of falling back to an empty configuration when
            the file exists but cannot be read. Anything about to rewrite
            the file loads it strictly, so a broken file is never replaced
            by an empty one.

    Returns:
        The parsed configuration. Without ``strict``, an empty one if the
        file is missing, unreadable or malformed.

    Raises:
        UserConfigError: With ``strict``, if the file exists but is unusable.
    """
    config_file = get_config_file()

    if not config_file.exists():
        return IgnoreConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict):
            return IgnoreConfig.model_validate(data)
        problem = "expected a mapping at the top level"
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        problem = str(e)

    if strict:
        raise UserConfigError(f"Cannot use {config_file}: {problem}")
    return IgnoreConfig()


def save_config(config: IgnoreConfig) -> None:
    """Save the configuration to ~/.gacp/config.yaml.

    Args:
        config: Configuration to save.

    Raises:
        UserConfigError: If the file cannot be written.
    """
    config_file = get_config_file()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(
                config.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise UserConfigError(f"Failed to save config to {config_file}: {e}")


def get_ignore_file_patterns(top_level: Path) -> list[str]:
    """Get the patterns in a repository's line-based ignore file.

    Args:
        top_level: The root directory of the git repository.

    Returns:
        List of patterns, empty if the file is missing or unreadable.
    """
    try:
        return parse_ignore_lines(get_ignore_file(top_level).read_text())
    except (OSError, UnicodeDecodeError):
        return []


def get_ignore_patterns(top_level: Path) -> list[str]:
    """Get the patterns stored for a repository in config.yaml.

    Args:
        top_level: The root directory of the git repository.

    Returns:
        List of patterns, possibly empty.
    """
    return load_config().patterns_for(top_level)


def load_ignore_patterns(top_level: Path, no_ignore: bool = False) -> list[str]:
    """Collect all auto-ignore patterns for a repository.

    Patterns from config.yaml come first, then those from the per-repository
    ignore file; duplicates are dropped.

    Args:
        top_level: The root directory of the git repository.
        no_ignore: Skip configuration entirely.

    Returns:
        List of patterns, possibly empty.
    """
    if no_ignore:
        return []

    patterns = []
    for pattern in get_ignore_patterns(top_level) + get_ignore_file_patterns(top_level):
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns


def add_ignore_pattern(top_level: Path, pattern: str) -> bool:
    """Add a pattern to a repository's list in config.yaml.

    Args:
        top_level: The root directory of the git repository.
        pattern: Pattern to add (e.g. "build", "*.log").

    Returns:
        True if the pattern was added, False if it was already present.

    Raises:
        UserConfigError: If config.yaml exists but cannot be parsed, or
            cannot be written.
    """
    config = load_config(strict=True)
    key = _repo_key(top_level)
    patterns = config.repositories.setdefault(key, [])
    if pattern in patterns:
        return False
    patterns.append(pattern)
    save_config(config)
    return True


def remove_ignore_pattern(top_level: Path, pattern: str) -> bool:
    """Remove a pattern from a repository's list in config.yaml.

    Patterns in the line-based ignore file are not touched.

    Args:
        top_level: The root directory of the git repository.
        pattern: Pattern to remove.

    Returns:
        True if pattern was found and removed, False otherwise.

    Raises:
        UserConfigError: If config.yaml exists but cannot be parsed, or
            cannot be written.
    """
    config = load_config(strict=True)
    key = _repo_key(top_level)
    patterns = config.repositories.get(key, [])
    if pattern not in patterns:
        return False
    patterns.remove(pattern)
    if not patterns:
        del config.repositories[key]
    save_config(config)
    return True
