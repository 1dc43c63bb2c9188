"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..api import analyze as run_analysis
from ..complexity.tree_folder import TreeFolder
from ..exceptions import CpxLensError

console = Console()


def run_or_exit(
    path: Path,
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> TreeFolder:
    """Run the analysis; print the error and exit with code 1 on failure."""
    try:
        folder = run_analysis(path, config_file=config, verbose=verbose, quiet=quiet)
    except CpxLensError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if folder is None:
        console.print(f"[red]Error:[/red] nothing to analyze at {path}")
        raise typer.Exit(1)
    return folder
