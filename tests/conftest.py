"""
Shared fixtures for user cache tests.
"""

from datetime import date

import pytest
from user_cache_system.caching import CacheLimitsConfig, create_lru_cache
from user_cache_system.models import Client, ClientType, User
from user_cache_system.repositories import CachedUserRepository, InMemoryUserRepository


def make_user(
    user_id: str = "user-1",
    email: str = "alice@example.com",
    firstname: str = "Alice",
    client_type: ClientType = ClientType.REGULAR
) -> User:
    """Helper to create a test user"""
    return User(
        id=user_id,
        client=Client(id="client-1", name="Acme", type=client_type),
        date_of_birth=date(1990, 5, 17),
        email=email,
        firstname=firstname,
        surname="Smith",
        has_credit_limit=True,
        credit_limit=300.0
    )


@pytest.fixture
def user_factory():
    """Factory for test users."""
    return make_user


@pytest.fixture
def delegate():
    """In-memory backing repository."""
    return InMemoryUserRepository()


@pytest.fixture
def user_cache():
    """Primary user cache with room for 10 users."""
    return create_lru_cache(CacheLimitsConfig(max_items_count=10))


@pytest.fixture
def email_index():
    """Email -> user id cache with room for 10 entries."""
    return create_lru_cache(CacheLimitsConfig(max_items_count=10))


@pytest.fixture
def repo(delegate, user_cache, email_index):
    """Cached repository over the in-memory delegate."""
    return CachedUserRepository(delegate, user_cache, email_index)
