"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="cpxlens",
    help="cpxlens - Cognitive and Cyclomatic Complexity per Method",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"cpxlens {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Score every method of a codebase with cognitive and cyclomatic complexity."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .explain import explain as _explain  # noqa: F401, E402
