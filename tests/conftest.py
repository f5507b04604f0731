"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # resolve() so comparisons survive symlinked temp dirs (macOS)
        yield Path(tmpdir).resolve()


@pytest.fixture
def repo_root(temp_dir):
    """Create a fake repository tree.

    Layout::

        mod.txt
        newdir/a.txt
        newdir/sub/b.txt
        src/app.py
    """
    root = temp_dir / "repo"
    root.mkdir()
    (root / ".git").mkdir()
    (root / "mod.txt").write_text("modified\n")
    (root / "newdir" / "sub").mkdir(parents=True)
    (root / "newdir" / "a.txt").write_text("a\n")
    (root / "newdir" / "sub" / "b.txt").write_text("b\n")
    (root / "src").mkdir()
    (root / "src" / "app.py").write_text("print('hi')\n")
    return root


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the ~/.gacp configuration directory at a temp location."""
    config_dir = temp_dir / ".gacp"
    mocker.patch("gacp.user_config._CONFIG_DIR", config_dir)
    return config_dir
