"""Init command implementation.

Writes ~/.config/linecol/config.toml, or shows the settings linecol would
currently use. An unreadable config file never blocks --force.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from linecol.core.config import Config

console = Console()


def _settings_table(config: Config) -> Table:
    table = Table(title=f"Settings ({config.config_file})", show_lines=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_column("Source", style="dim")
    for key, value, from_file in config.settings():
        table.add_row(key, escape(value), "config" if from_file else "default")
    return table


def command(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing (or unreadable) configuration"
    ),
    show: bool = typer.Option(
        False, "--show", help="Show effective settings without writing anything"
    ),
    editor: Optional[str] = typer.Option(
        None, "--editor", "-e", help="Editor command template to store (e.g. 'vim +{line} {path}')"
    ),
):
    """Initialize linecol configuration (XDG-compliant)."""
    if show:
        try:
            console.print(_settings_table(Config()))
        except RuntimeError as e:
            console.print(f"[red]ERROR:[/red] {escape(str(e))}")
            console.print("[yellow]Hint:[/yellow] run 'linecol init --force' to rewrite it")
            raise typer.Exit(code=1) from e
        return

    # Paths only; the existing file may be the broken one being replaced
    config = Config(load=False)
    if config.exists() and not force:
        console.print(
            f"[yellow]Configuration already exists:[/yellow] {config.config_file}\n"
            "Use [bold]--force[/bold] to overwrite or [bold]--show[/bold] to view settings"
        )
        raise typer.Exit(code=1)

    try:
        if config.exists():
            config.config_file.unlink()
            console.print(f"[yellow]Removed existing config:[/yellow] {config.config_file}")
        config_path = config.create_default(editor_command=editor)
    except OSError as e:
        console.print(f"[red]ERROR:[/red] Failed to create configuration: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✓[/green] Configuration created: [bold]{config_path}[/bold]")
    console.print(_settings_table(Config(config.config_dir)))
