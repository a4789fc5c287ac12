"""Filesystem capability used by the path resolver.

The resolver never touches the filesystem directly. It goes through an
object implementing the Filesystem protocol, which answers three questions:
does a path exist, what kind of entry is it, and what is its canonical form.
LocalFilesystem answers them with pathlib; tests substitute an in-memory
double.

How to implement a new filesystem:
----------------------------------
1. Create a class with canonicalize(), kind() and exists() methods
2. canonicalize() raises FileNotFoundError or NotADirectoryError when the
   entry does not exist, and any other OSError for every other failure
3. kind() never raises; it returns EntryKind.MISSING for absent entries
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol, Union

PathLike = Union[str, Path]

# Errors that mean "nothing lives at this path"
_MISSING_ERRORS = (FileNotFoundError, NotADirectoryError)


class EntryKind(str, Enum):
    """Kinds of filesystem entries."""

    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    OTHER = "OTHER"
    MISSING = "MISSING"


class ProbeKind(str, Enum):
    """Outcome of probing a candidate path."""

    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    OTHER = "OTHER"
    MISSING = "MISSING"
    ERROR = "ERROR"


class Filesystem(Protocol):
    """Protocol for the existence, type and canonicalization primitive.

    Implementations must be safe to call from several threads at once; the
    resolver shares one instance across concurrent resolutions.
    """

    def canonicalize(self, path: str) -> Path:
        """Return the canonical absolute form of path.

        Raises:
            FileNotFoundError: If no entry exists at path
            NotADirectoryError: If a parent component is not a directory
            OSError: For any other failure (permissions, symlink loops, ...)
        """
        ...

    def kind(self, path: PathLike) -> EntryKind:
        """Return the kind of entry at path, following symlinks."""
        ...

    def exists(self, path: PathLike) -> bool:
        """Return True if an entry exists at path."""
        ...


class LocalFilesystem:
    """Filesystem implementation backed by the host operating system."""

    def canonicalize(self, path: str) -> Path:
        try:
            return Path(path).resolve(strict=True)
        except RuntimeError as e:
            # Older interpreters report symlink loops as RuntimeError
            raise OSError(errno.ELOOP, str(e), path) from e

    def kind(self, path: PathLike) -> EntryKind:
        candidate = Path(path)
        try:
            if candidate.is_file():
                return EntryKind.FILE
            if candidate.is_dir():
                return EntryKind.DIRECTORY
            if candidate.exists():
                return EntryKind.OTHER
        except OSError:
            return EntryKind.MISSING
        return EntryKind.MISSING

    def exists(self, path: PathLike) -> bool:
        return self.kind(path) is not EntryKind.MISSING


@dataclass(frozen=True)
class Probe:
    """Result of probing one candidate path.

    Attributes:
        candidate: The path string that was probed
        kind: What the probe found
        path: Canonical path (set unless kind is MISSING or ERROR)
        error: Underlying I/O failure (set only when kind is ERROR)
    """

    candidate: str
    kind: ProbeKind
    path: Optional[Path] = None
    error: Optional[OSError] = None


def probe(filesystem: Filesystem, candidate: str) -> Probe:
    """Canonicalize candidate and classify the entry it names.

    Args:
        filesystem: Filesystem capability to query
        candidate: Absolute path string to probe

    Returns:
        Probe describing the entry. Never raises for I/O failures; they are
        reported with kind=ERROR.
    """
    try:
        canonical = filesystem.canonicalize(candidate)
    except _MISSING_ERRORS:
        return Probe(candidate, ProbeKind.MISSING)
    except OSError as e:
        return Probe(candidate, ProbeKind.ERROR, error=e)

    entry_kind = filesystem.kind(canonical)
    if entry_kind is EntryKind.FILE:
        return Probe(candidate, ProbeKind.FILE, canonical)
    if entry_kind is EntryKind.DIRECTORY:
        return Probe(candidate, ProbeKind.DIRECTORY, canonical)
    if entry_kind is EntryKind.OTHER:
        return Probe(candidate, ProbeKind.OTHER, canonical)
    # Removed between canonicalize() and kind()
    return Probe(candidate, ProbeKind.MISSING)
