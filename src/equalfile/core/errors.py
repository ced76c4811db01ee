"""Error taxonomy for equalfile.

Content mismatch is never an error: it is reported as an unequal
:class:`~equalfile.core.models.CompareResult`.
"""

from __future__ import annotations


class EqualFileError(Exception):
    """Base class for all equalfile errors."""


class ConfigurationError(EqualFileError, ValueError):
    """Raised when a comparator is misconfigured by its caller."""


class InsufficientBufferError(ConfigurationError):
    """Raised when the comparison buffer cannot hold one byte per stream."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"insufficient buffer size: {size} (need at least 2 bytes)")


class NonPositiveMaxSizeError(ConfigurationError):
    """Raised when an unbounded comparison is given a max size below 1."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"nonpositive max size: {max_size}")


class NegativeMaxSizeError(ConfigurationError):
    """Raised when a file comparison is configured with a negative max size."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"negative max size: {max_size}")


class NonRegularFileError(EqualFileError, OSError):
    """Raised for directories, devices and other non-regular files.

    Such files may report a size of zero while never reaching end of input.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"can't compare non-regular file: {path}")


class MaxSizeReachedError(EqualFileError):
    """Raised on request when equality was only verified up to the size limit."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"max read size reached: {max_size}")
