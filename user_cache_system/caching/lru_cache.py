"""
LRU (Least Recently Used) Cache implementation.

Keeps a dict from key to node plus an explicit doubly-linked recency list,
so both get() and set() are O(1). The node after the head sentinel is the
least recently used entry, the node before the tail sentinel the most
recently used one.
"""

import logging
import threading
from typing import Dict, Generic, Optional
from ..exceptions import InvalidConfigurationError
from ..interfaces.cache import ICache, CacheStats, V

logger = logging.getLogger(__name__)


class _Node(Generic[V]):
    """Recency list node"""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Optional[str] = None, value: Optional[V] = None):
        self.key = key
        self.value = value
        self.prev: Optional["_Node[V]"] = None
        self.next: Optional["_Node[V]"] = None


class LRUCache(ICache[V]):
    """
    Thread-safe LRU cache bounded by item count.

    Features:
    - O(1) get/set operations
    - Automatic LRU eviction when capacity is reached
    - get() refreshes recency, like set()
    - Hit/miss/eviction tracking

    Every operation runs under a single lock and performs no I/O.
    """

    def __init__(self, capacity: int):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of entries, must be positive

        Raises:
            InvalidConfigurationError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfigurationError(
                f"Cache capacity must be a positive integer, got {capacity!r}"
            )

        self._capacity = capacity
        self._lock = threading.Lock()
        self._nodes: Dict[str, _Node[V]] = {}

        # Sentinels: head.next is LRU, tail.prev is MRU
        self._head: _Node[V] = _Node()
        self._tail: _Node[V] = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head

        # Statistics tracking
        self._stats = CacheStats()

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

    def get(self, key: str) -> Optional[V]:
        """
        Retrieve value from cache with LRU tracking.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        with self._lock:
            node = self._nodes.get(key)
            if node is None:
                self._stats.misses += 1
                return None

            # Cache hit - move to most recently used end
            self._unlink(node)
            self._append(node)
            self._stats.hits += 1
            return node.value

    def set(self, key: str, value: V) -> None:
        """
        Store value in cache with LRU eviction if needed.

        Updating an existing key never evicts.

        Args:
            key: Cache key
            value: Value to cache
        """
        with self._lock:
            node = self._nodes.get(key)
            if node is not None:
                node.value = value
                self._unlink(node)
                self._append(node)
                return

            node = _Node(key, value)
            self._nodes[key] = node
            self._append(node)

            if len(self._nodes) > self._capacity:
                self._evict_lru()

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            Copy of CacheStats with hits, misses, evictions, size and hit_rate
        """
        with self._lock:
            self._stats.size = len(self._nodes)
            return self._stats.model_copy()

    def _evict_lru(self) -> None:
        """Evict the least recently used item (first node after head)."""
        victim = self._head.next
        self._unlink(victim)
        del self._nodes[victim.key]
        self._stats.evictions += 1
        logger.debug(f"Evicted LRU entry '{victim.key}'")

    def _append(self, node: _Node[V]) -> None:
        last = self._tail.prev
        last.next = node
        node.prev = last
        node.next = self._tail
        self._tail.prev = node

    @staticmethod
    def _unlink(node: _Node[V]) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._nodes)})"
