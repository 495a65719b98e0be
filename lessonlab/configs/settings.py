"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from lessonlab.configs.auth import AuthSettings
from lessonlab.configs.base import BaseSettings
from lessonlab.configs.content import ContentSettings
from lessonlab.configs.database import DatabaseSettings
from lessonlab.configs.sandbox import SandboxSettings
from lessonlab.configs.verification import VerificationSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    auth: AuthSettings = AuthSettings()
    sandbox: SandboxSettings = SandboxSettings()
    content: ContentSettings = ContentSettings()
    verification: VerificationSettings = VerificationSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from lessonlab.configs import get_settings
        settings = get_settings()
    """
    return Settings()
