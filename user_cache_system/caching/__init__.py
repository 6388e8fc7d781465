"""
Cache construction entry point.

Callers obtain ICache instances through create_lru_cache(); the LRUCache
class itself stays in caching.lru_cache.
"""

from .factory import CacheLimitsConfig, create_lru_cache

__all__ = [
    "CacheLimitsConfig",
    "create_lru_cache",
]
