"""
In-memory user repository.

Dict-backed IUserRepository with call counters, useful for embedding and
for observing how often a caching layer reaches the backing store.
"""

from typing import Dict, List, Optional
from ..interfaces.repository import IUserRepository
from ..models.user import User


class InMemoryUserRepository(IUserRepository):
    """Repository keeping users in a dict keyed by id"""

    def __init__(self):
        self._users: Dict[str, User] = {}

        # Public: Statistics
        self.find_call_count = 0
        self.save_call_count = 0
        self.exists_call_count = 0

    def find_by_id(self, user_id: str) -> Optional[User]:
        self.find_call_count += 1
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        self.find_call_count += 1
        return next((u for u in self._users.values() if u.email == email), None)

    def find_all(self) -> List[User]:
        self.find_call_count += 1
        return list(self._users.values())

    def save(self, user: User) -> bool:
        self.save_call_count += 1
        self._users[user.id] = user
        return True

    def update(self, user: User) -> bool:
        self.save_call_count += 1
        if user.id not in self._users:
            return False
        self._users[user.id] = user
        return True

    def exists_by_email(self, email: str) -> bool:
        self.exists_call_count += 1
        return any(u.email == email for u in self._users.values())

    def add_user(self, user: User) -> None:
        """Seed a user without touching the call counters."""
        self._users[user.id] = user

    def reset(self) -> None:
        """Drop all users and zero the counters."""
        self._users.clear()
        self.find_call_count = 0
        self.save_call_count = 0
        self.exists_call_count = 0
