"""
Wiring for a fully cached user repository.
"""

from typing import Optional
from .caching.factory import create_lru_cache
from .config import Settings
from .interfaces.repository import IUserRepository
from .repositories.cached_user_repository import CachedUserRepository
from .repositories.json_user_repository import JsonUserRepository


def build_user_repository(
    settings: Optional[Settings] = None,
    delegate: Optional[IUserRepository] = None
) -> CachedUserRepository:
    """
    Build a CachedUserRepository from settings.

    Args:
        settings: Application settings (read from the environment if omitted)
        delegate: Backing repository; defaults to a JsonUserRepository at
            settings.db_file_path

    Returns:
        CachedUserRepository with independent user and email caches
    """
    settings = settings or Settings()
    if delegate is None:
        delegate = JsonUserRepository(settings.db_file_path)

    return CachedUserRepository(
        delegate=delegate,
        cache=create_lru_cache(settings.cache_limits()),
        email_index=create_lru_cache(settings.email_index_limits())
    )
