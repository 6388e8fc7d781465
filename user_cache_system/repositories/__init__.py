from .cached_user_repository import CachedUserRepository
from .in_memory_user_repository import InMemoryUserRepository
from .json_user_repository import JsonUserRepository

__all__ = [
    "CachedUserRepository",
    "InMemoryUserRepository",
    "JsonUserRepository",
]
