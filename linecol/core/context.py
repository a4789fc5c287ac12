"""Resolution context: the working directory relative arguments are joined to."""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ResolverContext:
    """Holds the base directory used to absolutize relative arguments.

    The working directory is computed once, when the context is created, and
    never changes afterwards. A single context can therefore be shared by
    resolutions running on several threads.

    Attributes:
        working_dir: Base directory for relative arguments. Empty (Path(""))
            when the process working directory could not be determined.
    """

    def __init__(self, working_dir: Optional[Path] = None):
        """Initialize context from an explicit directory or the process cwd.

        Args:
            working_dir: Base directory (default: Path.cwd())
        """
        self.working_dir = Path(working_dir) if working_dir is not None else self._current_dir()

    @staticmethod
    def _current_dir() -> Path:
        """Return the process working directory, or an empty base if unavailable."""
        try:
            return Path.cwd()
        except OSError as e:
            logger.warning(f"Cannot determine working directory, using empty base: {e}")
            return Path("")

    def absolutize(self, arg: str) -> str:
        """Make a raw argument absolute.

        Absolute arguments are returned verbatim. Relative ones are joined onto
        working_dir with pathlib, which drops "." segments and trailing
        slashes, so "./a.txt" becomes "<working_dir>/a.txt".

        Args:
            arg: Raw command-line argument (absolute or relative)

        Returns:
            arg unchanged if it is absolute, else arg joined onto working_dir
        """
        if Path(arg).is_absolute():
            return arg
        return str(self.working_dir / arg)
