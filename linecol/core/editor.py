"""Editor execution wrapper."""

import logging
import shlex
import subprocess
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from linecol.core.models import PathSpecifier

logger = logging.getLogger(__name__)


class EditorRunner:
    """Hands a resolved PathSpecifier off to an external editor.

    The editor command is a template split with shell rules. Each word may
    use the placeholders {path}, {line}, {column} and {target}; line and
    column default to 1 when the specifier carries no position.
    """

    def __init__(self, command_template: str):
        """Initialize runner with an editor command template.

        Args:
            command_template: e.g. "code --goto {target}" or "vim +{line} {path}"

        Raises:
            ValueError: If the template is empty
        """
        if not command_template.strip():
            raise ValueError("Editor command template is empty")
        self.command_template = command_template

    def build_command(self, specifier: PathSpecifier) -> List[str]:
        """Expand the template for specifier.

        Args:
            specifier: Resolved file or directory

        Returns:
            Argument list ready for subprocess

        Raises:
            ValueError: If the template uses an unknown placeholder
        """
        position = specifier.position
        values = {
            "path": str(specifier.path),
            "line": position.line if position else 1,
            "column": position.column if position else 1,
            "target": specifier.target(),
        }
        try:
            return [word.format(**values) for word in shlex.split(self.command_template)]
        except (KeyError, IndexError) as e:
            raise ValueError(
                f"Unknown placeholder {e} in editor command: {self.command_template}"
            ) from e

    def execute(self, specifier: PathSpecifier, console: Optional[Console] = None) -> int:
        """Run the editor for specifier.

        Args:
            specifier: Resolved file or directory
            console: Optional Rich console for displaying the command

        Returns:
            Exit code from the editor process

        Raises:
            RuntimeError: If the editor executable is not found in PATH
        """
        cmd = self.build_command(specifier)
        logger.info(f"Running editor: {shlex.join(cmd)}")
        if console:
            console.print(f"[dim]$ {escape(shlex.join(cmd))}[/dim]")

        try:
            result = subprocess.run(cmd, check=False)
        except FileNotFoundError as e:
            raise RuntimeError(
                f"Editor '{cmd[0]}' not found in PATH.\n"
                "Set editor.command in the config file or pass --editor"
            ) from e
        return result.returncode
