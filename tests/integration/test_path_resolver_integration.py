"""Integration tests for path resolution against the real filesystem.

These tests create files whose names contain colons, so they only run on
platforms that allow them.
"""

import os
import sys

import pytest

from linecol.core.context import ResolverContext
from linecol.core.models import ErrorKind, PathSpecifier, Position
from linecol.utils.path_resolver import PathResolutionError, PathResolver

pytestmark = pytest.mark.skipif(
    sys.platform == "win32", reason="colons are not allowed in Windows filenames"
)


@pytest.fixture
def project(tmp_path):
    """Temporary project with plain and colon-bearing names."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text("def main():\n    pass\n")
    (root / "build:log").write_text("step 1\n")
    (root / "a:3:4").write_text("literal\n")
    (root / "a").write_text("short\n")
    return root.resolve()


@pytest.fixture
def resolver(project):
    return PathResolver(context=ResolverContext(project))


class TestPathResolverIntegration:
    """End-to-end resolution with LocalFilesystem."""

    def test_file_with_line_and_column(self, resolver, project):
        """Should resolve FILE:LINE:COLUMN."""
        result = resolver.resolve("src/main.py:2:5")

        assert result == PathSpecifier.file(project / "src" / "main.py", Position(2, 5))

    def test_file_with_line(self, resolver, project):
        """Should resolve FILE:LINE with column 1."""
        result = resolver.resolve("src/main.py:2")

        assert result == PathSpecifier.file(project / "src" / "main.py", Position(2, 1))

    def test_directory(self, resolver, project):
        """Should resolve directories."""
        assert resolver.resolve("src") == PathSpecifier.directory(project / "src")

    def test_absolute_path(self, resolver, project):
        """Should accept absolute arguments."""
        result = resolver.resolve(f"{project / 'src' / 'main.py'}:1")

        assert result.position == Position(1, 1)

    def test_verbatim_colon_name(self, resolver, project):
        """A file named a:3:4 wins over file a at 3:4."""
        assert resolver.resolve("a:3:4") == PathSpecifier.file(project / "a:3:4")

    def test_colon_name_with_line(self, resolver, project):
        """build:log:7 resolves to build:log at line 7."""
        result = resolver.resolve("build:log:7")

        assert result == PathSpecifier.file(project / "build:log", Position(7, 1))

    def test_directory_with_position(self, resolver):
        """src:1:1 is NOT_A_FILE since src is a directory."""
        with pytest.raises(PathResolutionError) as exc_info:
            resolver.resolve("src:1:1")

        assert exc_info.value.kind is ErrorKind.NOT_A_FILE

    def test_nothing_exists(self, resolver, project):
        """does/not/exist:5:5 is NO_MATCH."""
        with pytest.raises(PathResolutionError) as exc_info:
            resolver.resolve("does/not/exist:5:5")

        assert exc_info.value.kind is ErrorKind.NO_MATCH
        assert exc_info.value.argument == str(project / "does/not/exist:5:5")

    def test_invalid_line(self, resolver):
        """src/main.py:abc:5 is INVALID_LINE naming abc."""
        with pytest.raises(PathResolutionError) as exc_info:
            resolver.resolve("src/main.py:abc:5")

        assert exc_info.value.kind is ErrorKind.INVALID_LINE
        assert exc_info.value.fragment == "abc"

    def test_path_below_file(self, resolver):
        """A path below a regular file is NO_MATCH, not an I/O failure."""
        with pytest.raises(PathResolutionError) as exc_info:
            resolver.resolve("src/main.py/inner:3")

        assert exc_info.value.kind is ErrorKind.NO_MATCH

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_resolves_to_target(self, resolver, project):
        """Should return the canonical target of a symlinked file."""
        (project / "link.py").symlink_to(project / "src" / "main.py")

        result = resolver.resolve("link.py:2")

        assert result.path == project / "src" / "main.py"

    def test_resolve_many_concurrently(self, resolver, project):
        """Should resolve many arguments across threads in order."""
        args = [f"src/main.py:{n}" for n in range(1, 41)] + ["missing:1"]

        outcomes = resolver.resolve_many(args, max_workers=8)

        assert [o.specifier.position.line for o in outcomes[:-1]] == list(range(1, 41))
        assert outcomes[-1].error.kind is ErrorKind.NO_MATCH
