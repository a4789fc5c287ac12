"""Open command implementation."""

import shlex
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from linecol.core.config import Config
from linecol.core.editor import EditorRunner
from linecol.utils.path_resolver import PathResolutionError, PathResolver

console = Console()


def command(
    target: str = typer.Argument(
        ..., help="File (optionally FILE:LINE or FILE:LINE:COLUMN) or directory to open"
    ),
    editor: Optional[str] = typer.Option(
        None, "--editor", "-e", help="Editor command template (default: from config)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the editor command without running it"
    ),
):
    """Open a file at a line and column, or a directory, in an editor."""
    try:
        specifier = PathResolver().resolve(target)
    except PathResolutionError as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e

    try:
        runner = EditorRunner(editor or Config().editor_command)

        if dry_run:
            typer.echo(shlex.join(runner.build_command(specifier)))
            return

        exit_code = runner.execute(specifier, console=console)
    except (RuntimeError, ValueError) as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if exit_code != 0:
        raise typer.Exit(code=exit_code)
