"""Rich terminal formatter for cpxlens."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..complexity.enums import ComplexityType, MethodStatus
from ..complexity.stats import Barchart, Stats
from ..complexity.tree_file import TreeFile
from ..complexity.tree_folder import TreeFolder
from ..complexity.tree_method import TreeMethod
from .base import BaseFormatter

MAX_METHODS = 20
MAX_BAR_WIDTH = 40

# pygments lexer per language
_LEXERS = {
    "python": "python",
    "javascript": "javascript",
    "typescript": "typescript",
    "tsx": "tsx",
}


def _status_label(status: MethodStatus) -> str:
    if status == MethodStatus.ERROR:
        return "[red bold]error[/red bold]"
    elif status == MethodStatus.WARNING:
        return "[yellow]warning[/yellow]"
    else:
        return "[green]correct[/green]"


def _number(value: float) -> str:
    return f"{value:g}"


class RichFormatter(BaseFormatter):
    """Rich terminal output: summary panel, status repartition, histograms, worst methods."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, folder: TreeFolder) -> None:
        stats = folder.stats
        self._print_summary(folder)
        self._print_repartition(stats)
        for cpx_type in ComplexityType:
            self._print_barchart(stats.barchart(cpx_type))
        self._print_methods(folder)
        self._print_failures(folder)

    def format(self, folder: TreeFolder) -> str:
        # Rich output goes directly to console; return empty string
        self.render(folder)
        return ""

    def render_explain(self, tree_file: TreeFile, method_name: Optional[str] = None) -> None:
        """Print the annotated code of the methods of ``tree_file``."""
        methods = [
            m for m in tree_file.methods if method_name is None or m.name == method_name
        ]
        if not methods:
            self.console.print(
                f"[yellow]No method{' named ' + repr(method_name) if method_name else ''} "
                f"found in {tree_file.path}.[/yellow]"
            )
            return
        lexer = _LEXERS.get(tree_file.language, "text")
        for method in methods:
            title = (
                f"[bold]{method.name}[/bold]  line {method.line}  "
                f"cognitive {_number(method.cpx_index)} {_status_label(method.cognitive_status)}  "
                f"cyclomatic {method.cyclomatic_cpx} {_status_label(method.cyclomatic_status)}"
            )
            self.console.print(
                Panel(
                    Syntax(method.displayed_code.text, lexer, line_numbers=False),
                    title=title,
                    title_align="left",
                    expand=False,
                )
            )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _print_summary(self, folder: TreeFolder) -> None:
        stats = folder.stats
        lines = [
            f"[bold]{folder.path}[/bold]",
            f"Files analyzed:    {stats.number_of_files}",
            f"Methods evaluated: {stats.number_of_methods}",
            f"Total cognitive complexity:  {_number(stats.total_cognitive_complexity)}",
            f"Total cyclomatic complexity: {_number(stats.total_cyclomatic_complexity)}",
        ]
        self.console.print(
            Panel("\n".join(lines), title="[bold cyan]cpxlens[/bold cyan]", expand=False)
        )

    def _print_repartition(self, stats: Stats) -> None:
        table = Table(title="Methods by status", show_header=True, header_style="bold")
        table.add_column("Complexity")
        table.add_column("Correct", justify="right", style="green")
        table.add_column("Warning", justify="right", style="yellow")
        table.add_column("Error", justify="right", style="red")
        for cpx_type in ComplexityType:
            counts = stats.number_of_methods_by_status.for_type(cpx_type)
            percents = stats.percents_by_status.for_type(cpx_type)
            table.add_row(
                cpx_type.value,
                f"{_number(counts.correct)} ({_number(percents.correct)}%)",
                f"{_number(counts.warning)} ({_number(percents.warning)}%)",
                f"{_number(counts.error)} ({_number(percents.error)}%)",
            )
        self.console.print(table)

    def _print_barchart(self, barchart: Barchart) -> None:
        if not barchart.data:
            return
        top = max(bar.y for bar in barchart.data) or 1
        table = Table(title=f"{barchart.cpx_type.value.capitalize()} complexity distribution")
        table.add_column("Complexity", justify="right")
        table.add_column("Methods", justify="right")
        table.add_column("")
        for bar in barchart.data:
            width = round(bar.y * MAX_BAR_WIDTH / top)
            table.add_row(str(bar.x), str(bar.y), "█" * width)
        self.console.print(table)

    def _print_methods(self, folder: TreeFolder) -> None:
        methods: list[tuple[TreeFile, TreeMethod]] = [
            (f, m) for f in folder.all_files() for m in f.methods
        ]
        if not methods:
            self.console.print("[dim]No methods found.[/dim]")
            return
        methods.sort(key=lambda fm: (-fm[1].cpx_index, -fm[1].cyclomatic_cpx))
        table = Table(title=f"Most complex methods (top {min(MAX_METHODS, len(methods))})")
        table.add_column("Method")
        table.add_column("File")
        table.add_column("Cognitive", justify="right")
        table.add_column("")
        table.add_column("Cyclomatic", justify="right")
        table.add_column("")
        for tree_file, method in methods[:MAX_METHODS]:
            table.add_row(
                method.name,
                f"{tree_file.relative_path or tree_file.name}:{method.line}",
                _number(method.cpx_index),
                _status_label(method.cognitive_status),
                str(method.cyclomatic_cpx),
                _status_label(method.cyclomatic_status),
            )
        self.console.print(table)

    def _print_failures(self, folder: TreeFolder) -> None:
        failures = [(f, failure) for f in folder.all_files() for failure in f.failures]
        if not failures:
            return
        self.console.print(f"[yellow]{len(failures)} method(s) could not be evaluated:[/yellow]")
        for tree_file, failure in failures:
            self.console.print(
                f"  {tree_file.relative_path or tree_file.name}:{failure.line} "
                f"{failure.name}: {failure.reason}"
            )
