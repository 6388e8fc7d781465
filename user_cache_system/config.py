import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from .caching.factory import CacheLimitsConfig


class Settings(BaseSettings):
    """Application configuration"""

    # Cache Settings
    cache_max_items_count: int = 100
    email_index_max_items_count: int = 100

    # Storage Settings
    db_file_path: str = "./data/db.json"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="USER_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def cache_limits(self) -> CacheLimitsConfig:
        """Limits for the primary user cache."""
        return CacheLimitsConfig(max_items_count=self.cache_max_items_count)

    def email_index_limits(self) -> CacheLimitsConfig:
        """Limits for the email -> user id index."""
        return CacheLimitsConfig(max_items_count=self.email_index_max_items_count)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for applications embedding the cache."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
