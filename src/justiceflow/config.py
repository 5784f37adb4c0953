"""Unified configuration for the JusticeFlow core."""

from pydantic_settings import BaseSettings
from typing import Optional
import logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every store, registry and service reads its defaults from here so that
    callers only need to inject a storage backend in tests.
    """

    # ===== STORAGE =====
    STORAGE_BACKEND: str = "file"
    """Key-value backend: memory, file or redis."""

    STORAGE_DIR: str = ".justiceflow"
    """Directory holding one JSON file per collection key (file backend)."""

    # ===== REDIS =====
    REDIS_URL: str = "redis://localhost:6379/0"
    """Redis connection string (redis backend)."""

    REDIS_KEY_PREFIX: Optional[str] = None
    """Optional namespace prepended to every collection key in Redis."""

    REDIS_SOCKET_TIMEOUT: float = 5.0
    """Seconds to wait on a Redis read or write before giving up."""

    # ===== COLLECTION KEYS =====
    CASES_KEY: str = "justiceflow_master_db_v2"
    """Storage key of the case collection."""

    STATIONS_KEY: str = "justice_stations_seq"
    """Storage key of the police station collection."""

    HOSPITALS_KEY: str = "justice_hospitals_seq"
    """Storage key of the hospital collection."""

    COURTS_KEY: str = "justice_courts_seq"
    """Storage key of the court collection."""

    ACCOUNTS_KEY: str = "justiceflow_users_final"
    """Storage key of the user account collection."""

    SEED_ON_FIRST_USE: bool = True
    """Write the example dataset when a collection key is absent."""

    # ===== VALIDATION =====
    PASSWORD_MIN_LENGTH: int = 8
    """Minimum password length for account password changes."""

    MAX_ATTACHMENT_BYTES: int = 500000  # 500KB
    """Maximum decoded size of an attachment on a medical report."""

    CASE_ID_PREFIX: str = "CRIM"
    """Prefix of generated case identifiers."""

    # ===== LOGGING =====
    LOG_LEVEL: str = logging.getLevelName(logging.INFO)
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

    # ===== APPLICATION =====
    ENV: str = "development"
    """Environment: development, staging, production."""

    DEBUG: bool = False
    """Enable debug mode."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = False


# Singleton instance
settings = Settings()

__all__ = ["Settings", "settings"]
