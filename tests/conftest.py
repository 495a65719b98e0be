"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory progress store, lesson content tree, sample learner,
sandbox descriptors
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest

from lessonlab.models.progress import User
from lessonlab.models.sandbox import SandboxDescriptor

CHALLENGE_QUERY = (
    "MATCH (p:Person {name: 'Emil Eifrem'})-[:ACTED_IN]->(m:Movie) "
    "RETURN count(m) > 0 AS outcome"
)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from lessonlab.boundary.db.base import Base
    from lessonlab.boundary.db.models import LessonAttemptModel, LessonProgressModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """
    Create a small course tree in AsciiDoc.

    Layout:
        neo4j-fundamentals (course usecase: movies)
          1-graph-thinking
            1-intro          plain lesson, no verify
            2-create-nodes   challenge, verify attribute
            3-merge          challenge, verify.cypher file, inherits usecase
        other-course (no usecase)
          1-basics
            1-challenge      challenge with verify but no usecase
    """
    course = tmp_path / "neo4j-fundamentals"
    lessons = course / "modules" / "1-graph-thinking" / "lessons"
    (lessons / "1-intro").mkdir(parents=True)
    (lessons / "2-create-nodes").mkdir(parents=True)
    (lessons / "3-merge").mkdir(parents=True)

    (course / "course.adoc").write_text(
        "= Neo4j Fundamentals\n:usecase: movies\n:categories: beginners\n\nWelcome.\n",
        encoding="utf-8",
    )
    (course / "modules" / "1-graph-thinking" / "module.adoc").write_text(
        "= Graph Thinking\n:order: 1\n\nModule body.\n",
        encoding="utf-8",
    )
    (lessons / "1-intro" / "lesson.adoc").write_text(
        "= Introduction\n:type: lesson\n:order: 1\n\nJust reading.\n",
        encoding="utf-8",
    )
    (lessons / "2-create-nodes" / "lesson.adoc").write_text(
        "= Create Nodes\n"
        ":type: challenge\n"
        ":order: 2\n"
        ":usecase: movies\n"
        f":verify: {CHALLENGE_QUERY}\n"
        "\n"
        "Create a Person node.\n",
        encoding="utf-8",
    )
    (lessons / "3-merge" / "lesson.adoc").write_text(
        "= Merging Data\n:type: challenge\n:order: 3\n\nUse MERGE.\n",
        encoding="utf-8",
    )
    (lessons / "3-merge" / "verify.cypher").write_text(
        "MATCH (m:Movie {title: 'Matrix'}) RETURN count(m) = 1 AS outcome\n",
        encoding="utf-8",
    )

    other = tmp_path / "other-course"
    other_lessons = other / "modules" / "1-basics" / "lessons" / "1-challenge"
    other_lessons.mkdir(parents=True)
    (other / "course.adoc").write_text("= Other Course\n\nNo sandbox.\n", encoding="utf-8")
    (other_lessons / "lesson.adoc").write_text(
        "= Challenge\n:type: challenge\n:verify: RETURN true AS outcome\n\nBody.\n",
        encoding="utf-8",
    )

    return tmp_path


@pytest.fixture
def challenge_query() -> str:
    """Provide the verification query of the create-nodes challenge."""
    return CHALLENGE_QUERY


@pytest.fixture
def sample_user() -> User:
    """Provide an authenticated learner."""
    return User(sub="auth0|learner-1", email="learner@example.com", name="Learner One")


@pytest.fixture
def sandbox_payload() -> dict:
    """Provide a running-instance payload as returned by the sandbox registry."""
    return {
        "sandboxId": "sb-123",
        "sandboxHashKey": "hash-123",
        "usecase": "movies",
        "scheme": "bolt",
        "host": "10-0-0-1.neo4jsandbox.com",
        "ip": "10.0.0.1",
        "boltPort": "7687",
        "username": "neo4j",
        "password": "s3cret-pass",
    }


@pytest.fixture
def sample_sandbox(sandbox_payload: dict) -> SandboxDescriptor:
    """Provide a sandbox descriptor for the movies use case."""
    return SandboxDescriptor.model_validate(sandbox_payload)
