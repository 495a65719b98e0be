"""
Verification configuration settings.

Time bounds applied when running a verification query against a sandbox.

Dependencies: pydantic_settings
System role: Query execution client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lessonlab.configs.base import BaseSettings


class VerificationSettings(BaseSettings):
    """Sandbox query execution configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VERIFICATION_",
        case_sensitive=False,
        extra="ignore",
    )

    query_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for connecting to a sandbox and running the verification query",
    )
    connection_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Driver connection acquisition timeout",
    )
