"""Public API for equalfile.core."""

from __future__ import annotations

from equalfile.core.comparator import (
    Comparator,
    HashComparator,
    compare_all,
    compare_files,
    compare_streams,
)
from equalfile.core.errors import (
    ConfigurationError,
    EqualFileError,
    InsufficientBufferError,
    MaxSizeReachedError,
    NegativeMaxSizeError,
    NonPositiveMaxSizeError,
    NonRegularFileError,
)
from equalfile.core.hashing import ContentHasher
from equalfile.core.models import (
    DEFAULT_BUFFER_SIZE,
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
from equalfile.core.paired import PairedStreamComparator
from equalfile.core.reader import BoundedReader, ByteWindowReader

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_MAX_SIZE",
    "BoundedReader",
    "ByteWindowReader",
    "CompareReport",
    "CompareResult",
    "Comparator",
    "ConfigurationError",
    "ContentHasher",
    "EqualFileError",
    "HashComparator",
    "InsufficientBufferError",
    "MaxSizeReachedError",
    "NegativeMaxSizeError",
    "NonPositiveMaxSizeError",
    "NonRegularFileError",
    "Options",
    "OutputMode",
    "PairComparison",
    "PairedStreamComparator",
    "ReadStats",
    "Reason",
    "ReportStats",
    "compare_all",
    "compare_files",
    "compare_streams",
]
