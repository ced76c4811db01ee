"""Memoized content hashing for repeated comparisons against shared files."""

from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from equalfile.core.errors import ConfigurationError

if TYPE_CHECKING:
    from os import PathLike

logger = logging.getLogger(__name__)

_HASH_BUFFER_SIZE = 65536


@dataclass(frozen=True)
class _CacheEntry:
    """Digest of a path and the read error hit while computing it, if any."""

    digest: bytes
    error: OSError | None = None


class ContentHasher:
    """Computes bounded-length digests of files, memoized per path.

    The first lookup of a path hashes at most ``max_size`` bytes of it and
    caches the digest together with any read error. Later lookups return
    the cached digest, or re-raise the cached error, without reading the
    file again. Entries are never evicted; discard the hasher to drop them.
    """

    def __init__(self, hash_algo: str = "sha256", *, debug: bool = False) -> None:
        """Initialize with a hash algorithm.

        Args:
            hash_algo: Hash algorithm name accepted by :func:`hashlib.new`.
            debug: Log every newly computed digest.

        Raises:
            ConfigurationError: If the algorithm is not available.
        """
        try:
            probe = hashlib.new(hash_algo)
        except ValueError as exc:
            msg = f"unsupported hash algorithm: {hash_algo}"
            raise ConfigurationError(msg) from exc
        # variable-length (shake) digests need an explicit output length
        if probe.digest_size == 0:
            msg = f"hash algorithm has no fixed digest size: {hash_algo}"
            raise ConfigurationError(msg)
        self._hash_algo = hash_algo
        self._debug = debug
        self._cache: dict[str, _CacheEntry] = {}

    @property
    def hash_algo(self) -> str:
        return self._hash_algo

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return os.fspath(path) in self._cache

    def digest_of(self, path: str | PathLike[str], max_size: int) -> bytes:
        """Return the digest of the first ``max_size`` bytes of ``path``.

        Args:
            path: File to hash. Used verbatim as the cache key.
            max_size: Maximum number of bytes fed to the hash.

        Returns:
            The raw digest bytes.

        Raises:
            OSError: If the file cannot be opened (not cached), or the read
                error cached from the first attempt.
        """
        key = os.fspath(path)
        entry = self._cache.get(key)
        if entry is None:
            entry = self._compute(Path(key), max_size)
            self._cache[key] = entry
            if self._debug:
                logger.debug(
                    "new hash[%s]=%s error=%r",
                    key,
                    entry.digest.hex(),
                    entry.error,
                )
        if entry.error is not None:
            raise entry.error
        return entry.digest

    def _compute(self, path: Path, max_size: int) -> _CacheEntry:
        """Hash up to ``max_size`` bytes of ``path`` using streaming reads."""
        hasher = hashlib.new(self._hash_algo)
        remaining = max_size
        with path.open("rb") as f:
            try:
                while remaining > 0:
                    chunk = f.read(min(_HASH_BUFFER_SIZE, remaining))
                    if not chunk:
                        break
                    hasher.update(chunk)
                    remaining -= len(chunk)
            except OSError as exc:
                return _CacheEntry(digest=hasher.digest(), error=exc)
        return _CacheEntry(digest=hasher.digest())
