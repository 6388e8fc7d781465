"""
Repository interface - abstracts user data access.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class IUserRepository(ABC):
    """
    Repository interface for user persistence operations.

    Follows Repository Pattern - implementations may add caching, file I/O
    or database access behind the same methods.
    """

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by id.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email address.

        Args:
            email: Email address (exact match)

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """Return all users, empty list if none exist."""
        pass

    @abstractmethod
    def save(self, user: User) -> bool:
        """
        Persist a new user.

        Returns:
            True if the save succeeded
        """
        pass

    @abstractmethod
    def update(self, user: User) -> bool:
        """
        Replace an existing user.

        Returns:
            True if the update succeeded (user existed)
        """
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Return True if a user with this email exists."""
        pass
