"""Resolve command implementation.

Resolves each argument into a file (with optional line:column) or a
directory and prints the results as text, JSON or YAML.
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from linecol.core.config import OUTPUT_FORMATS, Config
from linecol.core.context import ResolverContext
from linecol.utils.path_resolver import PathResolver, ResolutionOutcome

console = Console()


def _record(outcome: ResolutionOutcome) -> dict:
    record = {"argument": outcome.argument, "ok": outcome.ok}
    if outcome.ok:
        record.update(outcome.specifier.to_dict())
    else:
        record["error"] = outcome.error.kind.value
        record["message"] = str(outcome.error)
    return record


def _print_text(outcomes: List[ResolutionOutcome]) -> None:
    for outcome in outcomes:
        if outcome.ok:
            spec = outcome.specifier
            console.print(
                f"[green]{spec.kind.value:<9}[/green] {escape(spec.target())}",
                soft_wrap=True,
            )
        else:
            console.print(f"[red]ERROR:[/red] {escape(str(outcome.error))}", soft_wrap=True)


def command(
    arguments: List[str] = typer.Argument(
        ..., help="Paths to resolve, optionally suffixed with :LINE or :LINE:COLUMN"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: text, json or yaml (default: from config)"
    ),
    jobs: Optional[int] = typer.Option(
        None, "--jobs", "-j", min=1, help="Worker threads for multiple arguments"
    ),
    cwd: Optional[Path] = typer.Option(
        None, "--cwd", "-C", help="Base directory for relative paths (default: current directory)"
    ),
):
    """Resolve path arguments into files with positions or directories."""
    try:
        config = Config()
        fmt = output_format or config.output_format
        max_workers = jobs or config.jobs
    except RuntimeError as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if fmt not in OUTPUT_FORMATS:
        console.print(
            f"[red]ERROR:[/red] Unknown format '{escape(fmt)}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(code=1)

    resolver = PathResolver(context=ResolverContext(cwd.absolute() if cwd else None))
    outcomes = resolver.resolve_many(arguments, max_workers=max_workers)

    if fmt == "json":
        typer.echo(json.dumps([_record(o) for o in outcomes], indent=2))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump([_record(o) for o in outcomes], sort_keys=False), nl=False)
    else:
        _print_text(outcomes)

    if not all(o.ok for o in outcomes):
        raise typer.Exit(code=1)
