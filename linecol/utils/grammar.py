"""Suffix grammars for ``path:LINE:COLUMN`` and ``path:LINE`` arguments.

Both grammars are anchored to the end of the string and capture the path
greedily, so the path itself may contain colons. In ``path:LINE:COLUMN`` the
trailing groups are matched structurally as colon-free, separator-free
tokens, so ``name:word:7`` can still be split and folded back into a
filename; whether they are valid numbers is decided afterwards by
parse_unsigned(). In ``path:LINE`` the line group is ASCII digits only.

Examples:
    >>> match_line_column("/src/main.py:10:5").path
    '/src/main.py'

    >>> match_line_column("/notes/build:log:7").line_text
    'log'

    >>> match_line("/src/main.py:10").line_text
    '10'
"""

import re
from dataclasses import dataclass
from typing import Optional

# Largest value accepted for a line or column (unsigned 64-bit)
MAX_NUMBER = 2**64 - 1

LINE_COLUMN_PATTERN = re.compile(r"(.+):([^:/\\]+):([^:/\\]+)\Z", re.DOTALL)
LINE_PATTERN = re.compile(r"(.+):([0-9]+)\Z", re.DOTALL)


class NumberParseError(ValueError):
    """Raised when a line or column fragment is not an unsigned integer."""

    pass


@dataclass(frozen=True)
class SuffixMatch:
    """Structural decomposition of an argument.

    Attributes:
        source: The full string that was matched
        path: Greedy path capture
        line_text: Text of the line group
        column_text: Text of the column group (None for the line-only grammar)
        column_start: Offset of the column group in source (line+column only)
    """

    source: str
    path: str
    line_text: str
    column_text: Optional[str] = None
    column_start: Optional[int] = None

    def collapsed_path(self) -> str:
        """Path with the line group folded back into the filename.

        For ``name:number:7`` this is ``name:number``.
        """
        if self.column_start is None:
            raise ValueError("Only line+column matches can be collapsed")
        return self.source[: self.column_start - 1]


def match_line_column(text: str) -> Optional[SuffixMatch]:
    """Match ``<path>:<line>:<column>`` anchored at the end of text."""
    match = LINE_COLUMN_PATTERN.match(text)
    if not match:
        return None
    return SuffixMatch(
        source=text,
        path=match.group(1),
        line_text=match.group(2),
        column_text=match.group(3),
        column_start=match.start(3),
    )


def match_line(text: str) -> Optional[SuffixMatch]:
    """Match ``<path>:<line>`` anchored at the end of text."""
    match = LINE_PATTERN.match(text)
    if not match:
        return None
    return SuffixMatch(source=text, path=match.group(1), line_text=match.group(2))


def parse_unsigned(text: str) -> int:
    """Parse a line or column fragment as an unsigned 64-bit integer.

    Only ASCII digits are accepted; signs, whitespace and other Unicode
    digits are rejected.

    Args:
        text: Fragment captured by a grammar

    Returns:
        Parsed integer

    Raises:
        NumberParseError: If text is empty, contains a non-digit, or overflows
    """
    if not text:
        raise NumberParseError("cannot parse integer from empty string")
    if not (text.isascii() and text.isdigit()):
        raise NumberParseError("invalid digit found in string")
    value = int(text)
    if value > MAX_NUMBER:
        raise NumberParseError("number too large to fit in target type")
    return value
