from .cache import ICache, CacheStats
from .repository import IUserRepository

__all__ = [
    "ICache",
    "CacheStats",
    "IUserRepository",
]
