"""
Database table creation script.

Creates all progress store tables defined in ORM models.

Dependencies: sqlalchemy, lessonlab.configs
System role: Database schema initialization

Usage:
    python -m lessonlab.boundary.db.create_tables
"""

import asyncio
import logging

from lessonlab.boundary.db.base import Base
from lessonlab.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from lessonlab.boundary.db.models import LessonAttemptModel, LessonProgressModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Progress store tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
