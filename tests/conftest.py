"""Shared fixtures: an in-memory Filesystem double."""

import errno
import posixpath
from pathlib import Path

import pytest

from linecol.core.filesystem import EntryKind


class FakeFilesystem:
    """In-memory filesystem keyed by normalized absolute POSIX paths.

    Symlinks map a link path to its target; errors map a path to the
    OSError canonicalize() should raise for it. Every canonicalize() call
    is recorded in ``calls``.
    """

    def __init__(self):
        self.entries = {"/": EntryKind.DIRECTORY}
        self.links = {}
        self.errors = {}
        self.calls = []

    def add_file(self, path: str) -> "FakeFilesystem":
        self._add_parents(path)
        self.entries[posixpath.normpath(path)] = EntryKind.FILE
        return self

    def add_dir(self, path: str) -> "FakeFilesystem":
        self._add_parents(path)
        self.entries[posixpath.normpath(path)] = EntryKind.DIRECTORY
        return self

    def add_other(self, path: str) -> "FakeFilesystem":
        self._add_parents(path)
        self.entries[posixpath.normpath(path)] = EntryKind.OTHER
        return self

    def add_link(self, path: str, target: str) -> "FakeFilesystem":
        self._add_parents(path)
        self.links[posixpath.normpath(path)] = posixpath.normpath(target)
        return self

    def fail(self, path: str, code: int = errno.EACCES) -> "FakeFilesystem":
        self.errors[posixpath.normpath(path)] = OSError(code, "Permission denied", path)
        return self

    def _add_parents(self, path: str) -> None:
        parent = posixpath.dirname(posixpath.normpath(path))
        while parent not in self.entries:
            self.entries[parent] = EntryKind.DIRECTORY
            parent = posixpath.dirname(parent)

    def canonicalize(self, path: str) -> Path:
        self.calls.append(path)
        normalized = posixpath.normpath(path)
        if normalized in self.errors:
            raise self.errors[normalized]
        seen = set()
        while normalized in self.links:
            if normalized in seen:
                raise OSError(errno.ELOOP, "Too many levels of symbolic links", path)
            seen.add(normalized)
            normalized = self.links[normalized]
        if normalized not in self.entries:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return Path(normalized)

    def kind(self, path) -> EntryKind:
        return self.entries.get(posixpath.normpath(str(path)), EntryKind.MISSING)

    def exists(self, path) -> bool:
        return self.kind(path) is not EntryKind.MISSING


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem rooted at /."""
    return FakeFilesystem()
