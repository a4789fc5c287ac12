"""Type-safe data models for resolved path specifiers.

This module provides the value types produced by the path resolver: the
cursor Position, the PathSpecifier variant (file or directory) and the
ErrorKind enum describing why an argument could not be resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class SpecifierKind(str, Enum):
    """Kinds of filesystem entries a specifier may name."""

    FILE = "file"
    DIRECTORY = "directory"


class ErrorKind(str, Enum):
    """Reasons a path argument failed to resolve."""

    INVALID_LINE = "invalid_line"
    INVALID_COLUMN = "invalid_column"
    INVALID_LINE_AND_COLUMN = "invalid_line_and_column"
    NOT_A_FILE = "not_a_file"
    OTHER_IO_FAILURE = "other_io_failure"
    NO_MATCH = "no_match"
    EMPTY_ARGUMENT = "empty_argument"
    INVALID_PATH = "invalid_path"


@dataclass(frozen=True)
class Position:
    """1-based cursor position inside a file."""

    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class PathSpecifier:
    """A resolved command-line path: an existing directory, or an existing
    file with an optional cursor position.

    Attributes:
        kind: Whether the canonical path is a file or a directory
        path: Canonical absolute path of the entry
        position: Cursor position (files only)
    """

    kind: SpecifierKind
    path: Path
    position: Optional[Position] = None

    def __post_init__(self):
        if self.kind is SpecifierKind.DIRECTORY and self.position is not None:
            raise ValueError(f"Directory specifier cannot carry a position: {self.path}")

    @classmethod
    def file(cls, path: Path, position: Optional[Position] = None) -> PathSpecifier:
        return cls(SpecifierKind.FILE, path, position)

    @classmethod
    def directory(cls, path: Path) -> PathSpecifier:
        return cls(SpecifierKind.DIRECTORY, path)

    @property
    def is_file(self) -> bool:
        return self.kind is SpecifierKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is SpecifierKind.DIRECTORY

    def target(self) -> str:
        """Render as ``path`` or ``path:line:column`` for editor hand-off."""
        if self.position is None:
            return str(self.path)
        return f"{self.path}:{self.position}"

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping suitable for JSON or YAML output."""
        data: dict[str, Any] = {"kind": self.kind.value, "path": str(self.path)}
        if self.position is not None:
            data["line"] = self.position.line
            data["column"] = self.position.column
        return data
