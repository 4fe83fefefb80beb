"""Performance utilities for the clause analysis engine.

This module provides operation timing and the bounded LRU cache that lets
repeated analyses of the same clause skip the pipeline entirely.
"""

import functools
import hashlib
import logging
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, TypeVar

from .exceptions import CacheUnavailable
from .parsers.tokenizer import normalize_clause


logger = logging.getLogger(__name__)

T = TypeVar('T')


def timed_operation(operation_name: str):
    """
    Decorator to log how long an operation takes.

    Args:
        operation_name: Name of the operation to track.

    Example:
        @timed_operation("score_clause")
        def score_clause(tokens):
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                duration = time.perf_counter() - start_time
                logger.debug(f"{operation_name} completed in {duration * 1000:.2f}ms")
                return result
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(f"{operation_name} failed after {duration * 1000:.2f}ms: {e}")
                raise
        return wrapper
    return decorator


@dataclass
class CacheEntry:
    """A cached value and when it was last read or written."""
    key: str
    value: Any
    last_access_time: float = field(default_factory=time.monotonic)

    def touch(self) -> None:
        self.last_access_time = time.monotonic()


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache counters."""
    hits: int
    misses: int
    size: int
    max_size: int

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups that hit, 0.0 before any lookup."""
        if not self.total_requests:
            return 0.0
        return round(self.hits / self.total_requests, 4)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "total_requests": self.total_requests,
            "hit_rate": self.hit_rate,
            "size": self.size,
            "max_size": self.max_size,
        }


class AnalysisCache:
    """
    Bounded least-recently-used cache of analysis results.

    ``get`` and ``set`` are O(1). Inserting a new key into a full cache
    evicts the entry touched least recently. Every operation runs under a
    single lock; if the lock cannot be taken within ``lock_timeout``
    seconds, or the operation fails internally, CacheUnavailable is raised
    so the caller can fall back to computing the result.
    """

    def __init__(self, max_size: int = 100, lock_timeout: float = 1.0):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries.
            lock_timeout: Seconds to wait for the lock.
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.lock_timeout = lock_timeout
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(normalized: str, with_rewrite: bool = False) -> str:
        """Derive the cache key for a normalized clause and rewrite flag."""
        payload = f"{normalized}\x00{int(bool(with_rewrite))}".encode("utf-8")
        return hashlib.blake2b(payload, digest_size=16).hexdigest()

    @contextmanager
    def _locked(self, operation: str) -> Iterator[None]:
        if not self._lock.acquire(timeout=self.lock_timeout):
            raise CacheUnavailable(
                f"Timed out after {self.lock_timeout}s waiting for cache lock",
                operation=operation,
            )
        try:
            yield
        except CacheUnavailable:
            raise
        except Exception as e:
            raise CacheUnavailable(f"Cache {operation} failed: {e}", operation=operation) from e
        finally:
            self._lock.release()

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Args:
            key: Cache key.

        Returns:
            Cached value, or None on a miss.
        """
        with self._locked("get"):
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            entry.touch()
            self._entries.move_to_end(key)
            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Set a value in the cache.

        Args:
            key: Cache key.
            value: Value to cache.
        """
        with self._locked("set"):
            entry = self._entries.get(key)
            if entry is not None:
                entry.value = value
                entry.touch()
                self._entries.move_to_end(key)
                return

            if len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cache entry {evicted}")
            self._entries[key] = CacheEntry(key=key, value=value)

    def __contains__(self, key: str) -> bool:
        """Membership test; does not count as a hit or refresh the entry."""
        with self._locked("contains"):
            return key in self._entries

    def invalidate(self, key: str) -> bool:
        """
        Invalidate a cache entry.

        Returns:
            True if an entry was removed.
        """
        with self._locked("invalidate"):
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all entries and reset the hit and miss counters."""
        with self._locked("clear"):
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def size(self) -> int:
        """Get the current cache size."""
        with self._locked("size"):
            return len(self._entries)

    def stats(self) -> CacheStats:
        with self._locked("stats"):
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
                max_size=self.max_size,
            )

    def warm(
        self,
        clauses: Iterable[str],
        analyzer: Callable[[str], Any],
        with_rewrite: bool = False,
    ) -> int:
        """
        Pre-populate the cache.

        Args:
            clauses: Clauses to analyse.
            analyzer: Computes the value to cache for a normalized clause.
                It must not write to this cache itself.
            with_rewrite: Rewrite flag the entries are keyed under.

        Returns:
            Number of entries added.
        """
        added = 0
        for clause in clauses:
            normalized = normalize_clause(clause)
            key = self.make_key(normalized, with_rewrite)
            if key in self:
                continue
            self.set(key, analyzer(normalized))
            added += 1
        logger.info(f"Cache warmed with {added} entries")
        return added
