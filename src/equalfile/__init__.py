"""equalfile: check whether files and streams have identical content."""

from __future__ import annotations

from equalfile.core import (
    BoundedReader,
    Comparator,
    CompareResult,
    HashComparator,
    Options,
    compare_files,
    compare_streams,
)

__version__ = "0.1.0"

__all__ = [
    "BoundedReader",
    "CompareResult",
    "Comparator",
    "HashComparator",
    "Options",
    "__version__",
    "compare_files",
    "compare_streams",
]
