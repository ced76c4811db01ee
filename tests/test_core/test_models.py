"""Tests for equalfile.core.models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from equalfile.core.errors import MaxSizeReachedError
from equalfile.core.models import (
    DEFAULT_MAX_SIZE,
    CompareReport,
    CompareResult,
    Options,
    OutputMode,
    PairComparison,
    ReadStats,
    Reason,
    ReportStats,
)


def _pair(name: str, **kwargs: object) -> PairComparison:
    return PairComparison(
        left_path=Path(f"/tmp/{name}.left"),
        right_path=Path(f"/tmp/{name}.right"),
        **kwargs,  # type: ignore[arg-type]
    )


class TestEnums:
    """Verify enum values."""

    def test_reason_values(self) -> None:
        assert Reason.same_file == "same_file"
        assert Reason.max_size_reached == "max_size_reached"
        assert len(Reason) == 8

    def test_output_modes(self) -> None:
        assert [m.value for m in OutputMode] == ["rich", "json"]


class TestOptions:
    """Options defaults and immutability."""

    def test_defaults(self) -> None:
        options = Options()
        assert options.debug is False
        assert options.force_file_read is False
        assert options.max_size is None
        assert options.unlimited is False

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Options().debug = True  # type: ignore[misc]

    def test_default_ceiling(self) -> None:
        assert DEFAULT_MAX_SIZE == 10_000_000_000


class TestCompareResult:
    """Verdict helpers distinguish full matches from truncated ones."""

    def test_verified_match(self) -> None:
        result = CompareResult(equal=True, reason=Reason.content_match)
        assert result.verified is True
        result.raise_for_truncation()

    def test_mismatch_not_verified(self) -> None:
        result = CompareResult(equal=False, reason=Reason.content_mismatch)
        assert result.verified is False
        result.raise_for_truncation()

    def test_truncated_not_verified(self) -> None:
        result = CompareResult(
            equal=True,
            reason=Reason.max_size_reached,
            truncated=True,
            bytes_compared=3,
            max_size=3,
        )
        assert result.verified is False
        with pytest.raises(MaxSizeReachedError, match="max read size reached: 3") as exc_info:
            result.raise_for_truncation()
        assert exc_info.value.max_size == 3

    def test_frozen(self) -> None:
        result = CompareResult(equal=True, reason=Reason.same_file)
        with pytest.raises(FrozenInstanceError):
            result.equal = False  # type: ignore[misc]


class TestReadStats:
    """Mutable read counters."""

    def test_initial(self) -> None:
        stats = ReadStats()
        assert stats.count == 0
        assert stats.min_size is None

    def test_record(self) -> None:
        stats = ReadStats()
        for size in (4, 1, 7):
            stats.record(size)
        assert stats.count == 3
        assert stats.total == 12
        assert stats.min_size == 1
        assert stats.max_size == 7

    def test_reset(self) -> None:
        stats = ReadStats()
        stats.record(5)
        stats.reset()
        assert stats == ReadStats()


class TestReportStats:
    """Counting pair outcomes."""

    def test_empty(self) -> None:
        stats = ReportStats.from_pairs([])
        assert stats == ReportStats(total_pairs=0, matched=0, truncated=0, differed=0, errors=0)

    def test_mixed(self) -> None:
        pairs = [
            _pair("a", equal=True, reason=Reason.content_match),
            _pair("b", equal=True, reason=Reason.max_size_reached, truncated=True),
            _pair("c", equal=False, reason=Reason.size_mismatch),
            _pair("d", equal=False, error="boom"),
        ]
        stats = ReportStats.from_pairs(pairs)
        assert stats == ReportStats(total_pairs=4, matched=1, truncated=1, differed=1, errors=1)


class TestCompareReport:
    """all_equal requires every pair fully verified."""

    def _report(self, *pairs: PairComparison) -> CompareReport:
        return CompareReport(
            paths=(),
            hashed=False,
            pairs=pairs,
            stats=ReportStats.from_pairs(pairs),
        )

    def test_all_equal(self) -> None:
        report = self._report(_pair("a", equal=True, reason=Reason.same_file))
        assert report.all_equal is True

    def test_truncated_is_not_all_equal(self) -> None:
        report = self._report(_pair("a", equal=True, truncated=True))
        assert report.all_equal is False

    def test_empty_report_is_all_equal(self) -> None:
        assert self._report().all_equal is True
