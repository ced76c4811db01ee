"""Byte-window readers: statistics-tracking and length-bounded stream wrappers."""

from __future__ import annotations

import errno
import io
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from equalfile.core.models import ReadStats


class ByteStream(Protocol):
    """Any readable binary stream (file object, BytesIO, socket file, ...)."""

    def read(self, size: int = -1, /) -> bytes | None:
        """Read up to ``size`` bytes."""
        ...


def read_into(stream: ByteStream, view: memoryview) -> int:
    """Read once from ``stream`` into ``view`` and return the byte count.

    Uses ``readinto`` when the stream has it, ``read`` otherwise. A return
    value of 0 for a non-empty view means end of input.

    Raises:
        BlockingIOError: If a non-blocking stream has no data available.
    """
    readinto = getattr(stream, "readinto", None)
    if readinto is not None:
        n = readinto(view)
    else:
        data = stream.read(len(view))
        if data is None:
            n = None
        else:
            n = len(data)
            view[:n] = data
    if n is None:
        raise BlockingIOError(errno.EAGAIN, "non-blocking stream returned no data")
    return n


class BoundedReader(io.RawIOBase):
    """Stream wrapper that stops yielding data after ``limit`` bytes.

    A bounded reader carries its own length limit, so comparisons involving
    one skip the comparator's size limit entirely.
    """

    bounded = True

    def __init__(self, stream: ByteStream, limit: int) -> None:
        """Wrap ``stream`` so at most ``limit`` bytes can be read from it.

        Raises:
            ValueError: If limit is negative.
        """
        super().__init__()
        if limit < 0:
            msg = f"BoundedReader limit must be non-negative, got {limit}"
            raise ValueError(msg)
        self._stream = stream
        self.remaining = limit

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        if self.remaining <= 0:
            return 0
        view = memoryview(buffer).cast("B")
        if len(view) > self.remaining:
            view = view[: self.remaining]
        n = read_into(self._stream, view)
        self.remaining -= n
        return n


class ByteWindowReader:
    """Reads one stream into caller-supplied windows.

    Tracks the cumulative number of bytes consumed and, when a ReadStats
    object is supplied, records the size of every read for diagnostics.
    """

    def __init__(
        self,
        stream: ByteStream,
        *,
        stats: ReadStats | None = None,
        bounded: bool | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            stream: The underlying binary stream.
            stats: Shared read statistics, or None when diagnostics are off.
            bounded: Whether the stream is length-bounded by the caller.
                Defaults to the stream's own ``bounded`` capability flag.
        """
        self._stream = stream
        self._stats = stats
        self.bounded = bool(getattr(stream, "bounded", False)) if bounded is None else bounded
        self.consumed = 0

    def read(self, window: memoryview) -> int:
        """Read once into ``window``; 0 means end of input."""
        n = read_into(self._stream, window)
        self.consumed += n
        if self._stats is not None:
            self._stats.record(n)
        return n

    def fill(self, window: memoryview, start: int, stop: int) -> int:
        """Re-read into ``window[start:stop]`` until it is full or input ends.

        Returns:
            The number of valid bytes now in ``window``.
        """
        while start < stop:
            n = self.read(window[start:stop])
            if n == 0:
                break
            start += n
        return start
