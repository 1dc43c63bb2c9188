"""Explain command — annotated code of the methods of one file."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..formatters import JsonFormatter, RichFormatter
from ..formatters.json_formatter import method_record
from . import app
from ._common import console, run_or_exit


@app.command()
def explain(
    file: Path = typer.Argument(
        ...,
        help="Source file to explain",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Only show the method with this name"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show each method with a comment above every line that adds complexity."""
    folder = run_or_exit(file, config=config, verbose=verbose)
    if not folder.files:
        console.print(f"[yellow]{file} is not a supported source file.[/yellow]")
        raise typer.Exit(1)
    tree_file = folder.files[0]

    if json_output:
        if method is None:
            print(JsonFormatter().format_file(tree_file))
        else:
            records = [method_record(m) for m in tree_file.methods if m.name == method]
            print(json.dumps(records, indent=2))
        return

    RichFormatter(console).render_explain(tree_file, method)
