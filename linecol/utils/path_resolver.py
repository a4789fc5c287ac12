"""Path resolution for CLI arguments.

Resolves one command-line argument into a PathSpecifier: an existing
directory, or an existing file with an optional ``line:column`` position.

Resolution order:
1. Empty and malformed arguments are rejected before any filesystem access
2. The argument is made absolute against the context working directory
3. The argument is probed verbatim; an existing file or directory wins
4. ``path:LINE:COLUMN`` is tried, then ``path:LINE`` with the line group
   folded back into the filename, then ``path:LINE`` on its own
5. If nothing resolves, the most specific failure is raised
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from linecol.core.context import ResolverContext
from linecol.core.filesystem import Filesystem, LocalFilesystem, Probe, ProbeKind, probe
from linecol.core.models import ErrorKind, PathSpecifier, Position
from linecol.utils.grammar import (
    NumberParseError,
    SuffixMatch,
    match_line,
    match_line_column,
    parse_unsigned,
)

logger = logging.getLogger(__name__)


class PathResolutionError(Exception):
    """Raised when path resolution fails.

    Attributes:
        kind: Why resolution failed
        argument: Normalized argument (raw argument for empty/invalid input)
        fragment: Offending path or number text, if any
        cause: Parse failure or I/O error description, if any
        column_fragment: Offending column text (INVALID_LINE_AND_COLUMN only)
        column_cause: Column parse failure (INVALID_LINE_AND_COLUMN only)
    """

    def __init__(
        self,
        kind: ErrorKind,
        argument: str,
        fragment: Optional[str] = None,
        cause: Optional[str] = None,
        column_fragment: Optional[str] = None,
        column_cause: Optional[str] = None,
    ):
        self.kind = kind
        self.argument = argument
        self.fragment = fragment
        self.cause = cause
        self.column_fragment = column_fragment
        self.column_cause = column_cause
        super().__init__(self._render())

    def _render(self) -> str:
        if self.kind is ErrorKind.EMPTY_ARGUMENT:
            return "Path argument is empty"
        if self.kind is ErrorKind.INVALID_PATH:
            return f'Invalid path "{self.argument}": {self.cause}'
        if self.kind is ErrorKind.INVALID_LINE:
            return (
                f'Invalid line in "{self.argument}", cannot parse '
                f'"{self.fragment}" as line number because of "{self.cause}"'
            )
        if self.kind is ErrorKind.INVALID_COLUMN:
            return (
                f'Invalid column in "{self.argument}", cannot parse '
                f'"{self.fragment}" as column number because of "{self.cause}"'
            )
        if self.kind is ErrorKind.INVALID_LINE_AND_COLUMN:
            return (
                f'Invalid line and column in "{self.argument}", cannot parse '
                f'"{self.fragment}" as line number because of "{self.cause}", '
                f'cannot parse "{self.column_fragment}" as column number '
                f'because of "{self.column_cause}"'
            )
        if self.kind is ErrorKind.NOT_A_FILE:
            return f'"{self.fragment}" in the input argument "{self.argument}" is not a file'
        if self.kind is ErrorKind.OTHER_IO_FAILURE:
            return (
                f'Invalid path "{self.fragment}" in the input argument '
                f'"{self.argument}", because of "{self.cause}"'
            )
        return f'"{self.argument}" is not a file or directory'


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of resolving one argument out of many."""

    argument: str
    specifier: Optional[PathSpecifier] = None
    error: Optional[PathResolutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PathResolver:
    """Resolves command-line path arguments against a filesystem.

    The resolver holds no mutable state: the filesystem and the context are
    fixed at construction, so one instance may resolve arguments on several
    threads at once.
    """

    def __init__(
        self,
        filesystem: Optional[Filesystem] = None,
        context: Optional[ResolverContext] = None,
    ):
        """Initialize resolver.

        Args:
            filesystem: Filesystem capability (default: LocalFilesystem)
            context: Resolution context (default: process working directory)
        """
        self.filesystem = filesystem or LocalFilesystem()
        self.context = context or ResolverContext()

    def resolve(self, arg: str) -> PathSpecifier:
        """Resolve one raw argument.

        Args:
            arg: Raw argument string from CLI

        Returns:
            PathSpecifier for the existing file or directory

        Raises:
            PathResolutionError: If no interpretation of arg names an
                existing file or directory
        """
        if not arg:
            raise PathResolutionError(ErrorKind.EMPTY_ARGUMENT, arg)
        if "\x00" in arg:
            raise PathResolutionError(
                ErrorKind.INVALID_PATH, arg, cause="embedded null character"
            )

        path_str = self.context.absolutize(arg)
        logger.debug(f"Resolving {arg!r} as {path_str!r}")

        direct = self._probe(path_str)
        if direct.kind is ProbeKind.FILE:
            return PathSpecifier.file(direct.path)
        if direct.kind is ProbeKind.DIRECTORY:
            return PathSpecifier.directory(direct.path)

        return self._resolve_suffix(path_str)

    def resolve_many(
        self, args: Iterable[str], max_workers: Optional[int] = None
    ) -> List[ResolutionOutcome]:
        """Resolve several arguments concurrently.

        A failure only affects its own argument. Outcomes are returned in
        input order.

        Args:
            args: Raw argument strings
            max_workers: Thread pool size (default: ThreadPoolExecutor default)

        Returns:
            One ResolutionOutcome per argument
        """
        args = list(args)
        if not args:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self._outcome, args))

    def _outcome(self, arg: str) -> ResolutionOutcome:
        try:
            return ResolutionOutcome(arg, specifier=self.resolve(arg))
        except PathResolutionError as e:
            return ResolutionOutcome(arg, error=e)

    def _probe(self, candidate: str) -> Probe:
        result = probe(self.filesystem, candidate)
        logger.debug(f"Probe {candidate!r}: {result.kind.value}")
        return result

    def _resolve_suffix(self, path_str: str) -> PathSpecifier:
        """Try the suffix grammars on a normalized argument.

        A parse error or I/O failure does not end resolution immediately:
        a looser decomposition may still name an existing file. The first
        such failure is raised only if nothing resolves.
        """
        pending: Optional[PathResolutionError] = None
        io_failure: Optional[PathResolutionError] = None

        line_column = match_line_column(path_str)
        if line_column:
            line, line_error = self._parse(line_column.line_text)
            column, column_error = self._parse(line_column.column_text)

            if line_error is None and column_error is None:
                found = self._probe(line_column.path)
                if found.kind is ProbeKind.FILE:
                    return PathSpecifier.file(found.path, Position(line, column))
                if found.kind in (ProbeKind.DIRECTORY, ProbeKind.OTHER):
                    raise PathResolutionError(
                        ErrorKind.NOT_A_FILE, path_str, fragment=line_column.path
                    )
                if found.kind is ProbeKind.ERROR:
                    io_failure = self._io_error(path_str, found)
            else:
                pending = self._parse_error(path_str, line_column, line_error, column_error)

            if column_error is None:
                resolved = self._resolve_collapsed(line_column, column)
                if resolved is not None:
                    return resolved

        line_only = match_line(path_str)
        if line_only:
            line, line_error = self._parse(line_only.line_text)
            if line_error is not None:
                if pending is None:
                    pending = self._parse_error(path_str, line_only, line_error, None)
            else:
                found = self._probe(line_only.path)
                if found.kind is ProbeKind.FILE:
                    return PathSpecifier.file(found.path, Position(line))
                if found.kind in (ProbeKind.DIRECTORY, ProbeKind.OTHER):
                    raise PathResolutionError(
                        ErrorKind.NOT_A_FILE, path_str, fragment=line_only.path
                    )
                if found.kind is ProbeKind.ERROR and io_failure is None:
                    io_failure = self._io_error(path_str, found)

        if pending is not None:
            raise pending
        if io_failure is not None:
            raise io_failure
        raise PathResolutionError(ErrorKind.NO_MATCH, path_str)

    def _resolve_collapsed(self, match: SuffixMatch, column: int) -> Optional[PathSpecifier]:
        """Treat ``name:number:N`` as file ``name:number`` at line N."""
        found = self._probe(match.collapsed_path())
        if found.kind is ProbeKind.FILE:
            return PathSpecifier.file(found.path, Position(column))
        return None

    @staticmethod
    def _parse(text: str) -> tuple[Optional[int], Optional[NumberParseError]]:
        try:
            return parse_unsigned(text), None
        except NumberParseError as e:
            return None, e

    @staticmethod
    def _parse_error(
        path_str: str,
        match: SuffixMatch,
        line_error: Optional[NumberParseError],
        column_error: Optional[NumberParseError],
    ) -> PathResolutionError:
        if line_error is not None and column_error is not None:
            return PathResolutionError(
                ErrorKind.INVALID_LINE_AND_COLUMN,
                path_str,
                fragment=match.line_text,
                cause=str(line_error),
                column_fragment=match.column_text,
                column_cause=str(column_error),
            )
        if line_error is not None:
            return PathResolutionError(
                ErrorKind.INVALID_LINE, path_str, fragment=match.line_text, cause=str(line_error)
            )
        return PathResolutionError(
            ErrorKind.INVALID_COLUMN, path_str, fragment=match.column_text, cause=str(column_error)
        )

    @staticmethod
    def _io_error(path_str: str, found: Probe) -> PathResolutionError:
        return PathResolutionError(
            ErrorKind.OTHER_IO_FAILURE,
            path_str,
            fragment=found.candidate,
            cause=found.error.strerror or str(found.error),
        )


def resolve_path_argument(
    arg: str,
    filesystem: Optional[Filesystem] = None,
    working_dir: Optional[Path] = None,
) -> PathSpecifier:
    """Resolve a single CLI argument with a one-off resolver.

    Args:
        arg: Raw argument string from CLI
        filesystem: Filesystem capability (default: LocalFilesystem)
        working_dir: Base for relative arguments (default: Path.cwd())

    Returns:
        Resolved PathSpecifier

    Raises:
        PathResolutionError: If the argument cannot be resolved
    """
    resolver = PathResolver(filesystem, ResolverContext(working_dir))
    return resolver.resolve(arg)
