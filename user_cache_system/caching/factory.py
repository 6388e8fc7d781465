"""
Cache construction from capacity configuration.
"""

from pydantic import BaseModel, ConfigDict
from typing import Any
from ..exceptions import InvalidConfigurationError
from ..interfaces.cache import ICache
from .lru_cache import LRUCache


class CacheLimitsConfig(BaseModel):
    """Capacity limits for a single cache instance"""
    model_config = ConfigDict(frozen=True)

    # Validated by create_lru_cache so that bad values surface as
    # InvalidConfigurationError rather than a pydantic ValidationError
    max_items_count: Any


def create_lru_cache(config: CacheLimitsConfig) -> ICache:
    """
    Create an LRU cache from a capacity configuration.

    Args:
        config: CacheLimitsConfig with max_items_count

    Returns:
        Empty LRU cache holding at most max_items_count entries

    Raises:
        InvalidConfigurationError: If max_items_count is not a positive integer
    """
    capacity = config.max_items_count
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidConfigurationError(
            f"max_items_count must be a positive integer, got {capacity!r}"
        )
    return LRUCache(capacity)
