"""Memoizing key-value store with a single loader invocation per key.

Used wherever a placeholder naming hint is expensive to compute (a lookup
through the per-tag naming table) so each distinct key is computed at most
once for the cache's lifetime.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Loader runs under the lock, so concurrent get() calls for the same
      key cannot both invoke it
    - Values are stored even when they are None (membership, not sentinel)
    - Loader exceptions propagate and nothing is stored for the key

Python 3.13+.
"""

from collections.abc import Callable, Hashable, Mapping
from threading import RLock
from types import MappingProxyType

__all__ = ["LoadingCache"]


class LoadingCache[K: Hashable, V]:
    """Cache that computes missing values with a supplied loader.

    Attributes:
        hits: Number of get() calls served from the cache
        misses: Number of get() calls that invoked the loader

    Example:
        >>> cache = LoadingCache(str.upper)
        >>> cache.get("span")
        'SPAN'
        >>> dict(cache.as_map())
        {'span': 'SPAN'}
    """

    __slots__ = ("_entries", "_hits", "_loader", "_lock", "_misses")

    def __init__(self, loader: Callable[[K], V]) -> None:
        """Initialize loading cache.

        Args:
            loader: Pure function computing the value for a key
        """
        self._entries: dict[K, V] = {}
        self._loader = loader
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: K) -> V:
        """Return the value for key, invoking the loader on first request.

        Thread-safe.

        Args:
            key: Cache key

        Returns:
            Cached or freshly loaded value
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]

            self._misses += 1
            value = self._loader(key)
            self._entries[key] = value
            return value

    def as_map(self) -> Mapping[K, V]:
        """Read-only live view of all entries computed so far."""
        return MappingProxyType(self._entries)

    def clear(self) -> None:
        """Drop all entries and reset metrics.

        Thread-safe. The loader will run again for keys requested afterwards.
        """
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Thread-safe.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - hits (int): Number of cache hits
            - misses (int): Number of loader invocations
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of loader invocations.

        Thread-safe.
        """
        with self._lock:
            return self._misses
