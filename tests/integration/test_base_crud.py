"""
Test suite for BaseCRUD generic database operations.

Tests the generic create operation.
Uses async fixtures with SQLAlchemy mocking to verify correct query behavior.

System role: Verification of generic database layer foundation
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from lessonlab.boundary.db.CRUD.base_crud import BaseCRUD
from lessonlab.boundary.db.models import LessonProgressModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(LessonProgressModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_add_instance_to_session(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test create adds instance and flushes/refreshes."""
        # Act
        instance = await base_crud.create(
            mock_session, user_sub="u", course="c", module="m", lesson="l"
        )

        # Assert
        assert isinstance(instance, LessonProgressModel)
        assert instance.user_sub == "u"
        mock_session.add.assert_called_once_with(instance)
        mock_session.flush.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(instance)

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh to ensure ID generation."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        await base_crud.create(mock_session)

        # Assert
        assert call_order == ["flush", "refresh"]

