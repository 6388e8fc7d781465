"""
User Cache System

Bounded LRU caching for user lookups, layered over any user repository
with cache-aside reads and write-through writes.
"""

from .caching import CacheLimitsConfig, create_lru_cache
from .config import Settings
from .container import build_user_repository
from .exceptions import UserCacheError, InvalidConfigurationError, RepositoryError
from .interfaces import ICache, CacheStats, IUserRepository
from .models import User, Client, ClientType
from .repositories import CachedUserRepository, InMemoryUserRepository, JsonUserRepository

__version__ = "1.0.0"

__all__ = [
    "CacheLimitsConfig",
    "create_lru_cache",
    "Settings",
    "build_user_repository",
    "UserCacheError",
    "InvalidConfigurationError",
    "RepositoryError",
    "ICache",
    "CacheStats",
    "IUserRepository",
    "User",
    "Client",
    "ClientType",
    "CachedUserRepository",
    "InMemoryUserRepository",
    "JsonUserRepository",
]
