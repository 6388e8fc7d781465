"""
Cache interface - contract shared by the cache implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

V = TypeVar("V")


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC, Generic[V]):
    """
    Bounded string-keyed cache.

    Presence is only observable through get(): there is no delete,
    contains or size in the contract.
    """

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of entries held at once."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[V]:
        """
        Retrieve value from cache.

        A stored None is indistinguishable from a miss, so callers should
        not cache None values.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    def set(self, key: str, value: V) -> None:
        """
        Store value in cache, replacing any existing value for the key.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, and size
        """
        pass
