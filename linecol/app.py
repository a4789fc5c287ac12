"""Main Typer application instance."""

from typing import Optional

import typer
from rich.console import Console

from linecol.commands import init, open_target, resolve
from linecol.core.config import Config
from linecol.core.logging import setup_logging

app = typer.Typer(
    name="linecol",
    help="Resolve FILE:LINE:COLUMN command-line arguments into files, positions and directories",
    add_completion=False,
)

# Register commands
app.command(name="init")(init.command)
app.command(name="resolve")(resolve.command)
app.command(name="open")(open_target.command)


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: from config, else WARNING)"
    ),
):
    """Configure logging before any command runs."""
    try:
        if verbose:
            level = "DEBUG"
        elif log_level:
            level = log_level
        elif ctx.invoked_subcommand == "init":
            # init must work even when the config file is unreadable
            level = "WARNING"
        else:
            level = Config().log_level
        setup_logging(level)
    except (RuntimeError, ValueError) as e:
        Console(stderr=True).print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e


def main():
    """Entry point for pip-installed command."""
    app()


if __name__ == "__main__":
    main()
