"""Output seam shared by the rich and JSON report formats."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from equalfile.core.models import CompareReport, ReportStats


@runtime_checkable
class Renderer(Protocol):
    """Something that can present a pairwise comparison run.

    The CLI picks one renderer per invocation and calls exactly one of the
    two methods, depending on whether only summary counts were requested.
    """

    def render(self, report: CompareReport) -> None:
        """Present every pair verdict followed by the overall verdict."""
        ...

    def render_stats(self, stats: ReportStats) -> None:
        """Present the matched, truncated, differed and error counts."""
        ...
