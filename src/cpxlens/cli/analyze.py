"""Analyze command — complexity report for a file or folder."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..complexity.enums import MethodStatus
from ..formatters import JsonFormatter, RichFormatter
from . import app
from ._common import console, run_or_exit


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="File or folder to analyze (default: current directory)",
        exists=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich or json",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of the terminal",
    ),
    fail_on_error: bool = typer.Option(
        False,
        "--fail-on-error",
        help="Exit with code 2 when a method has an ERROR status",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """Compute cognitive and cyclomatic complexity of every method."""
    if output_format not in ("rich", "json"):
        console.print(f"[red]Error:[/red] unknown format {output_format!r} (rich or json)")
        raise typer.Exit(1)

    folder = run_or_exit(path, config=config, verbose=verbose, quiet=quiet)

    if output_format == "json":
        text = JsonFormatter().format(folder)
        if output is not None:
            output.write_text(text + "\n", encoding="utf-8")
            console.print(f"Report written to {output}")
        else:
            print(text)
    elif output is not None:
        with open(output, "w", encoding="utf-8") as f:
            RichFormatter(Console(file=f, width=120)).render(folder)
        console.print(f"Report written to {output}")
    else:
        RichFormatter(console).render(folder)

    if fail_on_error and any(
        max(m.cognitive_status, m.cyclomatic_status) == MethodStatus.ERROR
        for m in folder.all_methods()
    ):
        raise typer.Exit(2)
