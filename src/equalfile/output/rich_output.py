"""Rich console renderer (default output mode)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from equalfile.core.models import CompareReport, PairComparison, ReportStats

# (style, prefix, label) per pair outcome
_MATCH = ("green", "=", "match")
_TRUNCATED = ("yellow", "~", "match up to limit")
_DIFFER = ("red", "x", "differ")
_ERROR = ("bold red", "!", "error")


def _pair_style(pair: PairComparison) -> tuple[str, str, str]:
    """Return (rich_style, prefix_char, label) for a pair outcome."""
    if pair.error is not None:
        return _ERROR
    if not pair.equal:
        return _DIFFER
    if pair.truncated:
        return _TRUNCATED
    return _MATCH


class RichRenderer:
    """Renders pairwise comparison reports on a Rich console.

    Two files are shown as a single verdict line. More files are shown as a
    table with one row per pair.

    Pair indicators:
    - Match: green with '=' prefix
    - Match up to the size limit: yellow with '~' prefix
    - Differ: red with 'x' prefix
    - Error: bold red with '!' prefix
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
        """
        self._console = console or Console()

    def render(self, report: CompareReport) -> None:
        """Render the report and a final verdict line."""
        if len(report.pairs) == 1:
            self._render_pair_line(report.pairs[0])
        else:
            self._render_table(report)

        stats = report.stats
        if report.all_equal:
            self._console.print("[bold green]equal: files match[/bold green]")
        elif stats.differed == 0 and stats.errors == 0:
            self._console.print("[bold yellow]equal: files match up to the size limit[/bold yellow]")
        else:
            self._console.print("[bold red]equal: files differ[/bold red]")

    def render_stats(self, stats: ReportStats) -> None:
        """Render summary statistics."""
        self._console.print(
            f"[bold]{stats.total_pairs}[/bold] pairs compared: "
            f"[green]{stats.matched} matched[/green], "
            f"[yellow]{stats.truncated} truncated[/yellow], "
            f"[red]{stats.differed} differed[/red], "
            f"[bold red]{stats.errors} errors[/bold red]"
        )

    def _render_pair_line(self, pair: PairComparison) -> None:
        style, prefix, label = _pair_style(pair)
        left = escape(str(pair.left_path))
        right = escape(str(pair.right_path))
        detail = escape(self._detail(pair, label))
        self._console.print(f"[{style}]{prefix} {left} {right}: {detail}[/{style}]")

    def _render_table(self, report: CompareReport) -> None:
        title = "pairwise comparison (hashed)" if report.hashed else "pairwise comparison"
        table = Table(title=title, title_style="bold")
        table.add_column("Left", style="bold", no_wrap=True)
        table.add_column("Right", style="bold", no_wrap=True)
        table.add_column("Result", justify="center")
        table.add_column("Detail", style="dim")

        for pair in report.pairs:
            style, prefix, label = _pair_style(pair)
            table.add_row(
                escape(str(pair.left_path)),
                escape(str(pair.right_path)),
                f"[{style}]{prefix} {label}[/{style}]",
                escape(self._detail(pair, label)),
            )

        self._console.print(table)

    @staticmethod
    def _detail(pair: PairComparison, label: str) -> str:
        """Describe why a pair got its verdict."""
        if pair.error is not None:
            return pair.error
        if pair.truncated:
            return f"{label} ({pair.bytes_compared} bytes checked)"
        if pair.reason is None:
            return label
        return f"{label} ({pair.reason.value})"
