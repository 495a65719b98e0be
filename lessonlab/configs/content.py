"""
Lesson content store configuration.

Dependencies: pydantic_settings
System role: Content resolver configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lessonlab.configs.base import BaseSettings


class ContentSettings(BaseSettings):
    """File-system lesson content store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONTENT_",
        case_sensitive=False,
        extra="ignore",
    )

    root_dir: Path = Field(
        default=Path("asciidoc/courses"),
        description="Directory containing one sub-directory per course",
    )
