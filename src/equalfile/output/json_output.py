"""Machine readable report output for scripts consuming `equal`."""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from equalfile.core.models import CompareReport, ReportStats


class _ReportEncoder(json.JSONEncoder):
    """Writes file paths as plain strings; Reason values are already strings."""

    def default(self, o: object) -> object:
        if isinstance(o, PurePath):
            return str(o)
        return super().default(o)


class JsonRenderer:
    """Writes one JSON document per run.

    A full report carries the dataclass fields of every pair plus a derived
    ``all_equal`` flag, so consumers need not recount the stats.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Set up the destination stream.

        Args:
            output: Where the document is written. Defaults to sys.stdout.
            indent: Indentation passed to json.dump.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, report: CompareReport) -> None:
        """Write the report, including per-pair reasons and errors."""
        data = dataclasses.asdict(report)
        data["all_equal"] = report.all_equal
        self._dump(data)

    def render_stats(self, stats: ReportStats) -> None:
        """Write only the summary counts."""
        self._dump(dataclasses.asdict(stats))

    def _dump(self, data: dict[str, object]) -> None:
        json.dump(data, self._output, cls=_ReportEncoder, indent=self._indent)
        self._output.write("\n")
