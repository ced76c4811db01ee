"""Paired stream comparison: lockstep buffered reads over two streams."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from equalfile.core.errors import InsufficientBufferError, NonPositiveMaxSizeError
from equalfile.core.models import DEFAULT_BUFFER_SIZE, DEFAULT_MAX_SIZE, CompareResult, Reason
from equalfile.core.reader import ByteWindowReader

if TYPE_CHECKING:
    from equalfile.core.models import ReadStats
    from equalfile.core.reader import ByteStream

logger = logging.getLogger(__name__)


class PairedStreamComparator:
    """Compares two streams by reading both into halves of one shared buffer.

    Each iteration reads once from each stream. When one side returns fewer
    bytes than the other, the shorter side is re-read until both windows
    hold the same number of bytes or it runs out of input, so both streams
    are always compared at the same offset regardless of how each source
    chunks its reads.

    Unless either stream is bounded (or the limit is explicitly disabled),
    at most ``max_size`` bytes are compared. If the streams are still equal
    at that point and either has more data, the result is equal but
    ``truncated``.
    """

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        *,
        stats: ReadStats | None = None,
    ) -> None:
        """Allocate the shared buffer.

        Args:
            buffer_size: Total buffer length in bytes, split evenly between
                the two streams.
            stats: Read statistics to update, or None to skip bookkeeping.

        Raises:
            InsufficientBufferError: If each half would be smaller than 1 byte.
        """
        half = buffer_size // 2
        if half < 1:
            raise InsufficientBufferError(buffer_size)
        self._buffer = bytearray(2 * half)
        self._half = half
        self._stats = stats

    @property
    def buffer_size(self) -> int:
        return len(self._buffer)

    def compare(
        self,
        left: ByteStream,
        right: ByteStream,
        max_size: int | None = None,
        *,
        unlimited: bool = False,
    ) -> CompareResult:
        """Compare two streams for identical content.

        Args:
            left: First readable binary stream.
            right: Second readable binary stream.
            max_size: Maximum bytes to compare. ``None`` means
                :data:`DEFAULT_MAX_SIZE`. Ignored when either stream is
                bounded or ``unlimited`` is set.
            unlimited: Disable the size limit.

        Returns:
            The comparison verdict. Differing content is an unequal result,
            never an exception.

        Raises:
            NonPositiveMaxSizeError: If the limit applies and is below 1.
            OSError: Propagated unchanged from either stream.
        """
        reader1 = ByteWindowReader(left, stats=self._stats)
        reader2 = ByteWindowReader(right, stats=self._stats)
        limit = self._resolve_limit(reader1, reader2, max_size, unlimited=unlimited)

        view = memoryview(self._buffer)
        buf1 = view[: self._half]
        buf2 = view[self._half :]
        total = 0

        while True:
            window = self._half if limit is None else min(self._half, limit - total)
            if window == 0:
                return self._probe_past_limit(reader1, reader2, buf1, buf2, limit)

            n1 = reader1.read(buf1[:window])
            n2 = reader2.read(buf2[:window])

            if n1 < n2:
                n1 = reader1.fill(buf1, n1, n2)
            elif n2 < n1:
                n2 = reader2.fill(buf2, n2, n1)

            if n1 != n2:
                # one side ran out of input before the other
                return CompareResult(
                    equal=False,
                    reason=Reason.length_mismatch,
                    bytes_compared=total,
                    max_size=limit,
                )
            if n1 == 0:
                return CompareResult(
                    equal=True,
                    reason=Reason.content_match,
                    bytes_compared=total,
                    max_size=limit,
                )
            if buf1[:n1] != buf2[:n2]:
                return CompareResult(
                    equal=False,
                    reason=Reason.content_mismatch,
                    bytes_compared=total,
                    max_size=limit,
                )
            total += n1

    @staticmethod
    def _resolve_limit(
        reader1: ByteWindowReader,
        reader2: ByteWindowReader,
        max_size: int | None,
        *,
        unlimited: bool,
    ) -> int | None:
        """Return the effective byte limit, or None when no limit applies."""
        if reader1.bounded or reader2.bounded or unlimited:
            return None
        if max_size is None:
            return DEFAULT_MAX_SIZE
        if max_size < 1:
            raise NonPositiveMaxSizeError(max_size)
        return max_size

    @staticmethod
    def _probe_past_limit(
        reader1: ByteWindowReader,
        reader2: ByteWindowReader,
        buf1: memoryview,
        buf2: memoryview,
        limit: int,
    ) -> CompareResult:
        """Decide between a full match and truncation once ``limit`` bytes matched.

        Reads at most one more byte per stream. The probed bytes are never
        compared.
        """
        more1 = reader1.read(buf1[:1])
        more2 = reader2.read(buf2[:1])
        if more1 == 0 and more2 == 0:
            return CompareResult(
                equal=True,
                reason=Reason.content_match,
                bytes_compared=limit,
                max_size=limit,
            )
        logger.debug("max read size reached after %d bytes", limit)
        return CompareResult(
            equal=True,
            reason=Reason.max_size_reached,
            truncated=True,
            bytes_compared=limit,
            max_size=limit,
        )
