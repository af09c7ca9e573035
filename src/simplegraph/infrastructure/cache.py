"""
Generic LRU cache for query results.

This module provides a size-bounded LRU (Least Recently Used) cache with hit
and miss tracking. Graph instances use it to remember the answers to
``connected`` and ``shortest_path`` queries until the next mutation.

Features:
- LRU eviction policy
- Size limit of zero disables storage entirely
- Performance metrics
"""

from collections import OrderedDict
from typing import Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")  # Type of cached values


class LRUCache(Generic[T]):
    """
    LRU cache keyed by any hashable value.

    The cache evicts the least recently used entry once it grows past
    ``max_size``. It is not thread-safe; it is owned by a single graph
    instance and follows that instance's access rules.

    Attributes:
        max_size: Maximum number of entries to store
    """

    def __init__(self, max_size: int):
        """Initialize cache with given size limit."""
        if max_size < 0:
            raise ValueError("max_size must be non-negative")
        self._cache: "OrderedDict[Hashable, T]" = OrderedDict()
        self._max_size = max_size

        # Metrics
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: Hashable) -> Optional[T]:
        """
        Get value from cache.

        Args:
            key: Cache key to look up

        Returns:
            Cached value if present, None otherwise
        """
        if key in self._cache:
            self._hits += 1
            self._cache.move_to_end(key)
            return self._cache[key]

        self._misses += 1
        return None

    def put(self, key: Hashable, value: T) -> None:
        """
        Store value in cache.

        Args:
            key: Cache key to store value under
            value: Value to cache
        """
        if self._max_size == 0:
            return

        if key in self._cache:
            self._cache.pop(key)
        self._cache[key] = value

        # Evict least recently used if over size limit
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)
            self._evictions += 1

    def remove(self, key: Hashable) -> None:
        """Remove an item from the cache if present."""
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear all entries and reset metrics."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get_metrics(self) -> Dict[str, float]:
        """
        Get cache performance metrics.

        Returns:
            Dictionary containing:
            - hits: Number of cache hits
            - misses: Number of cache misses
            - evictions: Number of entries evicted for space
            - size: Current cache size
            - hit_rate: Cache hit rate
        """
        total_accesses = self._hits + self._misses
        hit_rate = float(self._hits) / total_accesses if total_accesses > 0 else 0.0
        return {
            "hits": float(self._hits),
            "misses": float(self._misses),
            "evictions": float(self._evictions),
            "size": float(len(self._cache)),
            "hit_rate": hit_rate,
        }

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache
