"""Tests for equalfile.output.rich_output."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from equalfile.core.models import CompareReport, PairComparison, Reason, ReportStats
from equalfile.output.base import Renderer
from equalfile.output.rich_output import RichRenderer


def _pair(left: str, right: str, **kwargs: object) -> PairComparison:
    return PairComparison(left_path=Path(left), right_path=Path(right), **kwargs)  # type: ignore[arg-type]


def _make_report(*pairs: PairComparison, hashed: bool = False) -> CompareReport:
    """Helper to build a CompareReport for testing."""
    paths = tuple(dict.fromkeys(p for pair in pairs for p in (pair.left_path, pair.right_path)))
    return CompareReport(
        paths=paths,
        hashed=hashed,
        pairs=pairs,
        stats=ReportStats.from_pairs(pairs),
    )


def _renderer() -> RichRenderer:
    return RichRenderer(console=Console(file=StringIO(), width=200))


def _capture_render(renderer: RichRenderer, report: CompareReport) -> str:
    """Render a report and capture the output as a string."""
    renderer.render(report)
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


def _capture_stats(renderer: RichRenderer, stats: ReportStats) -> str:
    """Render stats and capture the output as a string."""
    renderer.render_stats(stats)
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


class TestRichRendererInit:
    """Verify RichRenderer constructor."""

    def test_default_console(self) -> None:
        assert isinstance(RichRenderer()._console, Console)

    def test_custom_console(self) -> None:
        console = Console(file=StringIO())
        assert RichRenderer(console=console)._console is console

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RichRenderer(), Renderer)


class TestRichRendererSinglePair:
    """Two files render as a single verdict line."""

    def test_match(self) -> None:
        report = _make_report(_pair("a.txt", "b.txt", equal=True, reason=Reason.content_match))
        output = _capture_render(_renderer(), report)
        assert "= a.txt b.txt: match (content_match)" in output
        assert "equal: files match" in output

    def test_differ(self) -> None:
        report = _make_report(_pair("a.txt", "b.txt", equal=False, reason=Reason.size_mismatch))
        output = _capture_render(_renderer(), report)
        assert "x a.txt b.txt: differ (size_mismatch)" in output
        assert "equal: files differ" in output

    def test_truncated(self) -> None:
        report = _make_report(
            _pair(
                "a.txt",
                "b.txt",
                equal=True,
                reason=Reason.max_size_reached,
                truncated=True,
                bytes_compared=3,
            )
        )
        output = _capture_render(_renderer(), report)
        assert "(3 bytes checked)" in output
        assert "files match up to the size limit" in output

    def test_error(self) -> None:
        report = _make_report(_pair("a.txt", "gone", equal=False, error="[Errno 2] No such file"))
        output = _capture_render(_renderer(), report)
        assert "! a.txt gone: [Errno 2] No such file" in output
        assert "equal: files differ" in output


class TestRichRendererTable:
    """More than one pair renders as a table."""

    def test_table_rows(self) -> None:
        report = _make_report(
            _pair("one", "two", equal=True, reason=Reason.hash_match),
            _pair("one", "three", equal=False, reason=Reason.hash_mismatch),
            _pair("two", "three", equal=False, reason=Reason.hash_mismatch),
            hashed=True,
        )
        output = _capture_render(_renderer(), report)
        assert "pairwise comparison (hashed)" in output
        assert "hash_match" in output
        assert output.count("hash_mismatch") == 2
        assert "equal: files differ" in output

    def test_unhashed_title(self) -> None:
        report = _make_report(
            _pair("one", "two", equal=True, reason=Reason.content_match),
            _pair("one", "three", equal=True, reason=Reason.content_match),
            _pair("two", "three", equal=True, reason=Reason.same_file),
        )
        output = _capture_render(_renderer(), report)
        assert "pairwise comparison" in output
        assert "(hashed)" not in output
        assert "equal: files match" in output


class TestRichRendererStats:
    """Summary line."""

    def test_stats_line(self) -> None:
        stats = ReportStats(total_pairs=6, matched=2, truncated=1, differed=2, errors=1)
        output = _capture_stats(_renderer(), stats)
        assert "6 pairs compared" in output
        assert "2 matched" in output
        assert "1 truncated" in output
        assert "2 differed" in output
        assert "1 errors" in output
