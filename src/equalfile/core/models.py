"""Data models for equalfile comparison results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from equalfile.core.errors import MaxSizeReachedError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

# Only the first 10^10 bytes of an unbounded stream are compared by default.
DEFAULT_MAX_SIZE = 10_000_000_000
DEFAULT_BUFFER_SIZE = 20_000


class Reason(StrEnum):
    """Why a comparison reached its verdict."""

    same_file = "same_file"
    size_mismatch = "size_mismatch"
    hash_mismatch = "hash_mismatch"
    hash_match = "hash_match"
    content_match = "content_match"
    content_mismatch = "content_mismatch"
    length_mismatch = "length_mismatch"
    max_size_reached = "max_size_reached"


class OutputMode(StrEnum):
    """Output format for rendering results."""

    rich = "rich"
    json = "json"


@dataclass(frozen=True)
class Options:
    """Comparator configuration.

    Attributes:
        debug: Collect read statistics and log diagnostics. Never affects
            the verdict.
        force_file_read: Disable the same-file shortcut in file comparison.
        max_size: Cap on bytes compared per call. ``None`` lets the defaults
            apply (the file size for files, :data:`DEFAULT_MAX_SIZE` for
            streams).
        unlimited: Turn the size limit off entirely for streams.
    """

    debug: bool = False
    force_file_read: bool = False
    max_size: int | None = None
    unlimited: bool = False


@dataclass(frozen=True)
class CompareResult:
    """Verdict of a single comparison.

    ``truncated`` is only ever set together with ``equal``: the inputs were
    equal up to the size limit, and nothing beyond it was checked.
    """

    equal: bool
    reason: Reason
    truncated: bool = False
    bytes_compared: int = 0
    max_size: int | None = None

    @property
    def verified(self) -> bool:
        """True when the inputs are equal and were checked in full."""
        return self.equal and not self.truncated

    def raise_for_truncation(self) -> None:
        """Raise MaxSizeReachedError if the verdict stopped at the size limit."""
        if self.truncated:
            raise MaxSizeReachedError(self.max_size if self.max_size is not None else 0)


@dataclass
class ReadStats:
    """Read statistics gathered during one comparison call (debug only)."""

    count: int = 0
    min_size: int | None = None
    max_size: int = 0
    total: int = 0

    def reset(self) -> None:
        """Clear all counters before a new comparison."""
        self.count = 0
        self.min_size = None
        self.max_size = 0
        self.total = 0

    def record(self, size: int) -> None:
        """Account for one read of ``size`` bytes."""
        self.count += 1
        self.total += size
        if self.min_size is None or size < self.min_size:
            self.min_size = size
        self.max_size = max(self.max_size, size)


@dataclass(frozen=True)
class PairComparison:
    """Outcome of comparing one pair of files in a report."""

    left_path: Path
    right_path: Path
    equal: bool
    reason: Reason | None = None
    truncated: bool = False
    bytes_compared: int = 0
    error: str | None = None


@dataclass(frozen=True)
class ReportStats:
    """Summary counts for a pairwise report.

    Truncated pairs are counted separately from full matches.
    """

    total_pairs: int
    matched: int
    truncated: int
    differed: int
    errors: int

    @classmethod
    def from_pairs(cls, pairs: Sequence[PairComparison]) -> ReportStats:
        """Compute stats by counting pair outcomes."""
        ok = [p for p in pairs if p.error is None]
        return cls(
            total_pairs=len(pairs),
            matched=sum(1 for p in ok if p.equal and not p.truncated),
            truncated=sum(1 for p in ok if p.truncated),
            differed=sum(1 for p in ok if not p.equal),
            errors=len(pairs) - len(ok),
        )


@dataclass(frozen=True)
class CompareReport:
    """Top-level result of a pairwise run over several files."""

    paths: tuple[Path, ...]
    hashed: bool
    pairs: tuple[PairComparison, ...]
    stats: ReportStats

    @property
    def all_equal(self) -> bool:
        """True when every pair matched without error."""
        return self.stats.matched == self.stats.total_pairs
