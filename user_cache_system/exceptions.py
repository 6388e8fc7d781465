"""
Error taxonomy for the user cache system.
"""


class UserCacheError(Exception):
    """Base class for errors raised by this package"""


class InvalidConfigurationError(UserCacheError, ValueError):
    """Cache configuration is unusable (e.g. non-positive capacity)"""


class RepositoryError(UserCacheError):
    """Backing store could not be read or written"""
