"""Comparison orchestrator for files and streams."""

from __future__ import annotations

import logging
import os
import stat
from itertools import combinations
from pathlib import Path
from typing import TYPE_CHECKING

from equalfile.core.errors import NegativeMaxSizeError, NonRegularFileError
from equalfile.core.hashing import ContentHasher
from equalfile.core.models import (
    DEFAULT_BUFFER_SIZE,
    CompareReport,
    CompareResult,
    Options,
    PairComparison,
    ReadStats,
    Reason,
    ReportStats,
)
from equalfile.core.paired import PairedStreamComparator

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import BinaryIO

    from equalfile.core.reader import ByteStream

logger = logging.getLogger(__name__)


class Comparator:
    """Compares files and streams byte by byte.

    Owns a reusable buffer and read statistics, so an instance must not be
    shared between threads. File comparison composes metadata checks
    (regular file, same file, size) with the paired stream comparison.
    """

    hashed = False

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        *,
        options: Options | None = None,
    ) -> None:
        """Initialize the comparator.

        Args:
            buffer_size: Length of the shared read buffer; each stream gets
                half of it.
            options: Comparison options. Defaults to Options() if None.

        Raises:
            InsufficientBufferError: If buffer_size is below 2.
        """
        self._options = options or Options()
        self._stats = ReadStats()
        self._paired = PairedStreamComparator(
            buffer_size,
            stats=self._stats if self._options.debug else None,
        )

    @property
    def options(self) -> Options:
        return self._options

    @property
    def stats(self) -> ReadStats:
        """Read statistics of the most recent comparison (debug only)."""
        return self._stats

    def compare(self, left: ByteStream, right: ByteStream) -> CompareResult:
        """Compare two readable binary streams.

        The configured ``max_size`` applies unless either stream is a
        :class:`~equalfile.core.reader.BoundedReader` or the options are
        ``unlimited``.

        Raises:
            NonPositiveMaxSizeError: If the configured max size is below 1.
            OSError: Propagated from either stream.
        """
        return self._compare_streams(
            left,
            right,
            self._options.max_size,
            unlimited=self._options.unlimited,
        )

    def compare_files(
        self,
        left: str | os.PathLike[str],
        right: str | os.PathLike[str],
    ) -> CompareResult:
        """Compare the contents of two files.

        Args:
            left: Path to the first file.
            right: Path to the second file.

        Returns:
            The comparison verdict.

        Raises:
            NegativeMaxSizeError: If the configured max size is negative.
            NonRegularFileError: If either path is not a regular file.
            OSError: If either path cannot be opened, stat'ed or read.
        """
        max_size = self._options.max_size
        if max_size is not None and max_size < 0:
            raise NegativeMaxSizeError(max_size)

        left_path = Path(left)
        right_path = Path(right)

        # stat before opening so FIFOs and devices never block in open()
        left_info = self._stat_regular(left_path)
        right_info = self._stat_regular(right_path)

        with left_path.open("rb") as left_file, right_path.open("rb") as right_file:
            if not self._options.force_file_read and os.path.samestat(left_info, right_info):
                return CompareResult(equal=True, reason=Reason.same_file)

            if left_info.st_size != right_info.st_size:
                return CompareResult(equal=False, reason=Reason.size_mismatch)

            # Bound hashing and comparison even when no max size is configured.
            effective = max_size or left_info.st_size or 1
            return self._compare_open_files(
                left_path,
                right_path,
                left_file,
                right_file,
                effective,
                file_size=left_info.st_size,
            )

    def _compare_open_files(
        self,
        left_path: Path,
        right_path: Path,
        left_file: BinaryIO,
        right_file: BinaryIO,
        max_size: int,
        *,
        file_size: int,
    ) -> CompareResult:
        """Compare two open regular files of equal size."""
        return self._compare_streams(left_file, right_file, max_size, unlimited=False)

    def _compare_streams(
        self,
        left: ByteStream,
        right: ByteStream,
        max_size: int | None,
        *,
        unlimited: bool,
    ) -> CompareResult:
        """Run the paired comparison with per-call statistics bookkeeping."""
        if self._options.debug:
            self._stats.reset()

        result = self._paired.compare(left, right, max_size, unlimited=unlimited)

        if self._options.debug:
            logger.debug(
                "compare(buffer=%d, max_size=%s): read_count=%d read_min=%s "
                "read_max=%d read_sum=%d result=%s",
                self._paired.buffer_size,
                max_size,
                self._stats.count,
                self._stats.min_size,
                self._stats.max_size,
                self._stats.total,
                result.reason,
            )
        return result

    @staticmethod
    def _stat_regular(path: Path) -> os.stat_result:
        """Stat a path (following symlinks) and require a regular file."""
        info = path.stat()
        if not stat.S_ISREG(info.st_mode):
            raise NonRegularFileError(str(path))
        return info


class HashComparator(Comparator):
    """Comparator with a memoized-hash fast path for files.

    Intended for comparing many pairs drawn from a shared set of files:
    each file is hashed once, and pairs with different digests are reported
    unequal without a byte-by-byte pass. When ``compare_on_match`` is set
    (the default) a digest match is still confirmed byte by byte.

    Digest errors are cached with the digest, so a read failure seen once
    is reported for every later comparison involving that path.
    """

    hashed = True

    def __init__(
        self,
        hash_algo: str = "sha256",
        *,
        compare_on_match: bool = True,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        options: Options | None = None,
    ) -> None:
        """Initialize the hash-assisted comparator.

        Args:
            hash_algo: Hash algorithm name accepted by :func:`hashlib.new`.
            compare_on_match: Confirm matching digests byte by byte.
            buffer_size: Length of the shared read buffer.
            options: Comparison options. Defaults to Options() if None.

        Raises:
            ConfigurationError: If the buffer or hash algorithm is unusable.
        """
        super().__init__(buffer_size, options=options)
        self._compare_on_match = compare_on_match
        self._hasher = ContentHasher(hash_algo, debug=self._options.debug)

    @property
    def hasher(self) -> ContentHasher:
        return self._hasher

    @property
    def compare_on_match(self) -> bool:
        return self._compare_on_match

    def _compare_open_files(
        self,
        left_path: Path,
        right_path: Path,
        left_file: BinaryIO,
        right_file: BinaryIO,
        max_size: int,
        *,
        file_size: int,
    ) -> CompareResult:
        left_digest = self._hasher.digest_of(left_path, max_size)
        right_digest = self._hasher.digest_of(right_path, max_size)

        if left_digest != right_digest:
            return CompareResult(equal=False, reason=Reason.hash_mismatch)
        if not self._compare_on_match:
            # a digest over a prefix only vouches for that prefix
            truncated = max_size < file_size
            return CompareResult(
                equal=True,
                reason=Reason.hash_match,
                truncated=truncated,
                max_size=max_size if truncated else None,
            )

        if self._options.debug:
            logger.debug("compare_files(%s, %s): hash match, will compare bytes", left_path, right_path)
        return super()._compare_open_files(
            left_path,
            right_path,
            left_file,
            right_file,
            max_size,
            file_size=file_size,
        )


def compare_files(
    left: str | os.PathLike[str],
    right: str | os.PathLike[str],
    *,
    options: Options | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> CompareResult:
    """Compare two files with a fresh :class:`Comparator`."""
    return Comparator(buffer_size, options=options).compare_files(left, right)


def compare_streams(
    left: ByteStream,
    right: ByteStream,
    *,
    options: Options | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> CompareResult:
    """Compare two readable binary streams with a fresh :class:`Comparator`."""
    return Comparator(buffer_size, options=options).compare(left, right)


def compare_all(comparator: Comparator, paths: Iterable[Path]) -> CompareReport:
    """Compare every pair drawn from ``paths``, in order.

    I/O errors are recorded on the affected pair and do not stop the run.
    Configuration errors propagate.

    Args:
        comparator: Comparator used for every pair.
        paths: Files to compare pairwise.

    Returns:
        A CompareReport with one PairComparison per pair.
    """
    ordered = tuple(paths)
    pairs: list[PairComparison] = []

    for left, right in combinations(ordered, 2):
        try:
            result = comparator.compare_files(left, right)
        except OSError as exc:
            logger.debug("compare_files(%s, %s): error: %s", left, right, exc)
            pairs.append(PairComparison(left_path=left, right_path=right, equal=False, error=str(exc)))
            continue

        pairs.append(
            PairComparison(
                left_path=left,
                right_path=right,
                equal=result.equal,
                reason=result.reason,
                truncated=result.truncated,
                bytes_compared=result.bytes_compared,
            )
        )

    return CompareReport(
        paths=ordered,
        hashed=comparator.hashed,
        pairs=tuple(pairs),
        stats=ReportStats.from_pairs(pairs),
    )
