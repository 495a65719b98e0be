"""
Authentication configuration settings.

OpenID Connect userinfo endpoint used to resolve a learner's session
token to the authenticated user.

Dependencies: pydantic_settings
System role: Identity client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lessonlab.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Identity provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    userinfo_url: str = Field(
        default="http://localhost:8080/userinfo",
        description="OpenID Connect userinfo endpoint",
    )
    request_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for userinfo requests",
    )
