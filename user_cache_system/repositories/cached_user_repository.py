"""
CachedUserRepository - caching decorator for any IUserRepository.

Reads use the cache-aside pattern, writes use write-through:

1. Check the cache first (O(1) for hot users)
2. Fall back to the delegate repository on a miss
3. Populate the cache with whatever the delegate returned

Users are cached by id. A second cache maps email -> user id so that
find_by_email() can be served from the primary cache. The two caches evict
independently, so an email entry may point at an id that is no longer
cached; lookups always re-check the primary cache before trusting it.

The delegate is always called outside the cache locks. Concurrent misses
for the same key may query the delegate more than once.
"""

import logging
from typing import List, Optional
from ..caching.factory import CacheLimitsConfig, create_lru_cache
from ..interfaces.cache import ICache
from ..interfaces.repository import IUserRepository
from ..models.user import User

logger = logging.getLogger(__name__)


class CachedUserRepository(IUserRepository):
    """
    Decorator that adds caching to any IUserRepository implementation.

    Delegate exceptions are never caught here: they reach the caller
    unchanged and the caches are left as they were.
    """

    def __init__(
        self,
        delegate: IUserRepository,
        cache: ICache[User],
        email_index: Optional[ICache[str]] = None
    ):
        """
        Initialize the caching decorator.

        Args:
            delegate: Backing repository consulted on misses and writes
            cache: Primary cache of users keyed by id
            email_index: Cache of email -> user id. Defaults to a new LRU
                cache with the same capacity as the primary cache.
        """
        self._delegate = delegate
        self._cache = cache
        if email_index is None:
            email_index = create_lru_cache(CacheLimitsConfig(max_items_count=cache.capacity))
        self._email_index = email_index

    def find_by_id(self, user_id: str) -> Optional[User]:
        # Tier 1: Check cache
        cached_user = self._cache.get(user_id)
        if cached_user is not None:
            logger.debug(f"Cache hit for user id={user_id}")
            return cached_user

        # Tier 2: Query delegate (absence is not cached)
        logger.debug(f"Cache miss for user id={user_id}")
        user = self._delegate.find_by_id(user_id)
        if user is not None:
            self._remember(user_id, user)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        user_id = self._email_index.get(email)
        if user_id is not None:
            # The index may hold a stale pointer (evicted id, or a user whose
            # email has since changed); only a matching cached user is a hit
            cached_user = self._cache.get(user_id)
            if cached_user is not None and cached_user.email == email:
                logger.debug(f"Cache hit for user email={email}")
                return cached_user

        logger.debug(f"Cache miss for user email={email}")
        user = self._delegate.find_by_email(email)
        if user is not None:
            self._remember(user.id, user)
        return user

    def find_all(self) -> List[User]:
        """
        Return all users from the delegate and warm the cache with them.

        The read itself never comes from the cache. When the delegate returns
        more users than the cache can hold, the last ones processed survive.
        """
        users = self._delegate.find_all()
        for user in users:
            self._remember(user.id, user)
        logger.debug(f"Warmed cache with {len(users)} users")
        return users

    def save(self, user: User) -> bool:
        # Write-through: save to delegate first, then cache
        saved = self._delegate.save(user)
        if saved:
            self._remember(user.id, user)
        return saved

    def update(self, user: User) -> bool:
        # Write-through: update delegate first, then cache
        updated = self._delegate.update(user)
        if updated:
            self._remember(user.id, user)
        return updated

    def exists_by_email(self, email: str) -> bool:
        """
        Check whether a user with this email exists.

        An email index hit answers True without consulting the primary cache
        or the delegate; a miss always falls back to the delegate.
        """
        if self._email_index.get(email) is not None:
            return True
        return self._delegate.exists_by_email(email)

    def _remember(self, user_id: str, user: User) -> None:
        self._cache.set(user_id, user)
        self._email_index.set(user.email, user_id)
