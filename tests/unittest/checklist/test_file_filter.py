# AGPL-3.0 License

"""
Unit tests for the file filter.
"""

import re

from pr_pair.checklist.file_filter import filter_files, is_excluded


class TestFilterFiles:
    """Tests for filter_files."""

    def test_filters_excluded_files(self):
        """Test that files matching exclude patterns are removed."""
        files = [
            "src/index.ts",
            "node_modules/package/index.js",
            "dist/index.js",
            "README.md",
        ]
        exclude_patterns = [re.compile(r"^node_modules/"), re.compile(r"^dist/")]

        result = filter_files(files, exclude_patterns)

        assert result == ["src/index.ts", "README.md"]

    def test_empty_input(self):
        """Test that an empty file list stays empty."""
        assert filter_files([], [re.compile(r"^dist/")]) == []

    def test_no_patterns_keeps_everything(self):
        """Test that without exclude patterns every file survives."""
        files = ["b.py", "a.py", "c.py"]
        assert filter_files(files, []) == ["b.py", "a.py", "c.py"]

    def test_preserves_relative_order(self):
        """Test that surviving files keep their original order."""
        files = ["z.ts", "dist/a.js", "m.ts", "a.ts", "dist/b.js"]

        result = filter_files(files, [re.compile(r"^dist/")])

        assert result == ["z.ts", "m.ts", "a.ts"]

    def test_pattern_searches_anywhere_in_path(self):
        """Test that unanchored patterns match anywhere in the path."""
        files = ["src/app.generated.ts", "src/app.ts"]

        result = filter_files(files, [re.compile(r"\.generated\.")])

        assert result == ["src/app.ts"]

    def test_accepts_generator_of_patterns(self):
        """Test that a one-shot iterable of patterns is applied to every file."""
        files = ["dist/a.js", "dist/b.js", "src/c.ts"]
        patterns = (re.compile(p) for p in [r"^dist/"])

        assert filter_files(files, patterns) == ["src/c.ts"]


class TestIsExcluded:
    """Tests for is_excluded."""

    def test_any_pattern_excludes(self):
        patterns = [re.compile(r"^docs/"), re.compile(r"\.lock$")]

        assert is_excluded("yarn.lock", patterns)
        assert is_excluded("docs/index.md", patterns)
        assert not is_excluded("src/docs.ts", patterns)
