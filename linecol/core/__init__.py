"""Core business logic modules."""

from linecol.core.config import Config
from linecol.core.context import ResolverContext
from linecol.core.editor import EditorRunner
from linecol.core.filesystem import EntryKind, Filesystem, LocalFilesystem
from linecol.core.models import ErrorKind, PathSpecifier, Position, SpecifierKind

__all__ = [
    "Config",
    "EditorRunner",
    "EntryKind",
    "ErrorKind",
    "Filesystem",
    "LocalFilesystem",
    "PathSpecifier",
    "Position",
    "ResolverContext",
    "SpecifierKind",
]
