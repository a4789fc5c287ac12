"""Unit tests for ResolverContext."""

from pathlib import Path
from unittest.mock import patch

from linecol.core.context import ResolverContext


class TestResolverContext:
    """Test working directory handling."""

    def test_explicit_working_dir(self):
        """Should use the given directory."""
        context = ResolverContext(Path("/work"))

        assert context.working_dir == Path("/work")

    def test_defaults_to_process_cwd(self, tmp_path, monkeypatch):
        """Should read the process working directory at construction."""
        monkeypatch.chdir(tmp_path)

        context = ResolverContext()

        assert context.working_dir == Path.cwd()

    def test_cwd_is_read_once(self, tmp_path, monkeypatch):
        """Should not follow later changes of the process working directory."""
        monkeypatch.chdir(tmp_path)
        context = ResolverContext()
        first = context.working_dir

        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.chdir(other)

        assert context.working_dir == first
        assert context.absolutize("a.txt") == str(first / "a.txt")

    @patch("linecol.core.context.Path.cwd", side_effect=FileNotFoundError("gone"))
    def test_unavailable_cwd_degrades_to_empty_base(self, mock_cwd):
        """Should fall back to an empty base instead of failing."""
        context = ResolverContext()

        assert context.working_dir == Path("")
        assert context.absolutize("a.txt") == "a.txt"

    def test_absolute_argument_passes_through(self):
        """Should return absolute arguments verbatim."""
        context = ResolverContext(Path("/work"))

        assert context.absolutize("/etc/hosts:3") == "/etc/hosts:3"

    def test_relative_argument_is_joined(self):
        """Should join relative arguments onto the working directory."""
        context = ResolverContext(Path("/work"))

        assert context.absolutize("src/main.py:10:5") == "/work/src/main.py:10:5"

    def test_relative_argument_is_normalized_by_join(self):
        """Should drop "." segments and trailing slashes when joining."""
        context = ResolverContext(Path("/work"))

        assert context.absolutize("./a.txt") == "/work/a.txt"
        assert context.absolutize("src/") == "/work/src"
