"""
Sandbox registry configuration settings.

Location of the sandbox registry API used to look up running
database sandboxes for a learner session.

Dependencies: pydantic_settings
System role: Sandbox registry client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lessonlab.configs.base import BaseSettings


class SandboxSettings(BaseSettings):
    """Sandbox registry API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SANDBOX_",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default="http://localhost:3000/sandbox",
        description="Base URL of the sandbox registry API",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for sandbox registry requests",
    )
