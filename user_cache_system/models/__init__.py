from .user import User, Client, ClientType

__all__ = [
    "User",
    "Client",
    "ClientType",
]
