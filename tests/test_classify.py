"""Tests for gacp.classify module."""

from pathlib import Path

from gacp.classify import EVERYTHING, classify, matches_any
from gacp.expand import make_entry
from gacp.models import StatusCode
from gacp.paths import parse_ignore_pattern, parse_path_token


TOP = Path("/work/repo")


def _entry(status, repo_path, cwd=TOP):
    return make_entry(status, repo_path, TOP, cwd)


def _tokens(*raw, cwd=TOP):
    return [parse_path_token(r, TOP, cwd) for r in raw]


def _paths(entries):
    return [e.display_path for e in entries]


# Entries after expanding ["?? newdir/", "M mod.txt"]
SCENARIO_ENTRIES = [
    _entry(StatusCode.UNTRACKED, "newdir/a.txt"),
    _entry(StatusCode.MODIFIED, "mod.txt"),
]


class TestClassifyScenarios:
    """End-to-end classification scenarios."""

    def test_explicit_exclude(self):
        """Test exclude mod.txt with include everything."""
        result = classify(SCENARIO_ENTRIES, EVERYTHING, _tokens("mod.txt"))
        assert _paths(result.excluded) == ["mod.txt"]
        assert _paths(result.added) == ["newdir/a.txt"]
        assert result.dropped == ()

    def test_ignore_pattern_excludes_directory_contents(self):
        """Test that a configured 'newdir' pattern excludes newdir/a.txt."""
        exclude = [parse_ignore_pattern("newdir", TOP)]
        result = classify(SCENARIO_ENTRIES, EVERYTHING, exclude)
        assert _paths(result.excluded) == ["newdir/a.txt"]
        assert _paths(result.added) == ["mod.txt"]

    def test_explicit_include_drops_unnamed(self):
        """Test that an unnamed untracked file is dropped."""
        entries = SCENARIO_ENTRIES + [_entry(StatusCode.UNTRACKED, "other.txt")]
        result = classify(entries, _tokens("mod.txt"), [])
        assert _paths(result.added) == ["mod.txt"]
        assert _paths(result.excluded) == []
        assert _paths(result.dropped) == ["newdir/a.txt", "other.txt"]


class TestClassifyRules:
    """Tests for rule precedence and matching."""

    def test_exclude_wins_over_include(self):
        entries = [_entry(StatusCode.MODIFIED, "mod.txt")]
        result = classify(entries, _tokens("mod.txt"), _tokens("mod.txt"))
        assert _paths(result.excluded) == ["mod.txt"]
        assert result.added == ()

    def test_everything_adds_all_not_excluded(self):
        entries = [
            _entry(StatusCode.MODIFIED, "a.txt"),
            _entry(StatusCode.DELETED, "b.txt"),
            _entry(StatusCode.STAGED, "c/d.txt"),
        ]
        result = classify(entries, EVERYTHING, [])
        assert _paths(result.added) == ["a.txt", "b.txt", "c/d.txt"]

    def test_directory_exclusion_is_transitive(self):
        """Test that excluding a directory removes everything below it."""
        entries = [
            _entry(StatusCode.UNTRACKED, "build/x.o"),
            _entry(StatusCode.UNTRACKED, "build/deep/nested/y.o"),
            _entry(StatusCode.MODIFIED, "src/main.c"),
        ]
        result = classify(entries, EVERYTHING, _tokens("build"))
        assert _paths(result.excluded) == ["build/x.o", "build/deep/nested/y.o"]
        assert _paths(result.added) == ["src/main.c"]

    def test_directory_token_respects_segment_boundary(self):
        """Test that 'dir' does not match 'dir2/x'."""
        entries = [
            _entry(StatusCode.MODIFIED, "dir/x"),
            _entry(StatusCode.MODIFIED, "dir2/x"),
        ]
        result = classify(entries, EVERYTHING, _tokens("dir/"))
        assert _paths(result.excluded) == ["dir/x"]
        assert _paths(result.added) == ["dir2/x"]

    def test_include_directory_token(self):
        entries = [
            _entry(StatusCode.MODIFIED, "src/a.py"),
            _entry(StatusCode.MODIFIED, "docs/b.md"),
        ]
        result = classify(entries, _tokens("src"), [])
        assert _paths(result.added) == ["src/a.py"]
        assert _paths(result.dropped) == ["docs/b.md"]

    def test_tokens_from_subdirectory_match_top_level_entries(self):
        """Test that cwd-relative, ../ and marker tokens agree."""
        cwd = TOP / "src"
        entries = [
            _entry(StatusCode.MODIFIED, "README.md", cwd=cwd),
            _entry(StatusCode.MODIFIED, "src/a.py", cwd=cwd),
        ]
        assert _paths(entries) == [":/:README.md", "a.py"]

        for token in ("../README.md", ":/:README.md", ":/README.md", str(TOP / "README.md")):
            result = classify(entries, EVERYTHING, _tokens(token, cwd=cwd))
            assert _paths(result.excluded) == [":/:README.md"], token

    def test_glob_ignore_pattern(self):
        entries = [
            _entry(StatusCode.UNTRACKED, "logs/run.log"),
            _entry(StatusCode.UNTRACKED, "debug.log"),
            _entry(StatusCode.MODIFIED, "app.py"),
        ]
        exclude = [parse_ignore_pattern("*.log", TOP)]
        result = classify(entries, EVERYTHING, exclude)
        assert _paths(result.excluded) == ["logs/run.log", "debug.log"]
        assert _paths(result.added) == ["app.py"]

    def test_empty_input(self):
        result = classify([], EVERYTHING, [])
        assert result.added == ()
        assert result.excluded == ()
        assert result.max_display_width == 0


class TestPartitionProperty:
    """Every entry lands in exactly one bucket."""

    def test_partition(self):
        entries = [
            _entry(StatusCode.MODIFIED, "a.txt"),
            _entry(StatusCode.UNTRACKED, "b/c.txt"),
            _entry(StatusCode.DELETED, "d.txt"),
            _entry(StatusCode.STAGED, "e/f/g.txt"),
        ]
        for include in (EVERYTHING, _tokens("a.txt", "e"), _tokens("zzz")):
            for exclude in ([], _tokens("b"), _tokens("a.txt", "e/f")):
                result = classify(entries, include, exclude)
                buckets = list(result.added) + list(result.excluded) + list(result.dropped)
                assert sorted(_paths(buckets)) == sorted(_paths(entries))
                assert len(buckets) == len(entries)


class TestMaxDisplayWidth:
    """Tests for the display width computed during classification."""

    def test_counts_added_and_excluded_only(self):
        entries = [
            _entry(StatusCode.MODIFIED, "short"),
            _entry(StatusCode.MODIFIED, "medium/file.txt"),
            _entry(StatusCode.MODIFIED, "a/really/long/dropped/path.txt"),
        ]
        result = classify(entries, _tokens("short"), _tokens("medium"))
        assert result.max_display_width == len("medium/file.txt")

    def test_includes_escape_marker(self):
        cwd = TOP / "src"
        entries = [_entry(StatusCode.MODIFIED, "README.md", cwd=cwd)]
        result = classify(entries, EVERYTHING, [])
        assert result.max_display_width == len(":/:README.md")


class TestMatchesAny:
    """Tests for matches_any function."""

    def test_no_tokens(self):
        assert not matches_any(_entry(StatusCode.MODIFIED, "a"), [])

    def test_exact_file(self):
        assert matches_any(_entry(StatusCode.MODIFIED, "a/b"), _tokens("a/b"))
