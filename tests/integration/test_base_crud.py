"""
Test suite for BaseCRUD generic database operations.

Tests create, read (by ID, filtered listing, count), update, delete and exists
against a mocked AsyncSession.

System role: Verification of generic database layer foundation
"""

import uuid
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import String
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SampleModel(Base, UUIDMixin, TimestampMixin):
    """Minimal timestamped model for exercising BaseCRUD."""

    __tablename__ = "crud_sample_rows"

    status: Mapped[str] = mapped_column(String(20), default="draft")


class UntimedSampleModel(Base, UUIDMixin):
    """Model without timestamps, so listings are unordered."""

    __tablename__ = "crud_sample_untimed_rows"


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(SampleModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    return uuid.uuid4()


def _scalars_result(rows: list) -> MagicMock:
    mock_scalars = MagicMock()
    mock_scalars.all = MagicMock(return_value=rows)
    mock_result = MagicMock()
    mock_result.scalars = MagicMock(return_value=mock_scalars)
    return mock_result


def _executed_sql(mock_session: AsyncSession, literal: bool = True) -> str:
    statement = mock_session.execute.call_args.args[0]
    if not literal:
        return str(statement)
    return str(statement.compile(compile_kwargs={"literal_binds": True}))


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh so generated IDs are loaded."""
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        instance = await base_crud.create(mock_session, status="published")

        mock_session.add.assert_called_once_with(instance)
        assert instance.status == "published"
        assert call_order == ["flush", "refresh"]


class TestBaseCRUDGetByID:
    """Test suite for BaseCRUD.get_by_id() method."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_model_when_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_instance = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.get_by_id(mock_session, sample_id)

        assert result is mock_instance
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.get_by_id(mock_session, sample_id) is None


class TestBaseCRUDGetAll:
    """Test suite for BaseCRUD.get_all() method."""

    @pytest.mark.asyncio
    async def test_get_all_should_order_newest_first(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test timestamped models are listed by created_at descending."""
        instances = [MagicMock(), MagicMock()]
        mock_session.execute = AsyncMock(return_value=_scalars_result(instances))

        result = await base_crud.get_all(mock_session)

        assert result == instances
        assert "ORDER BY crud_sample_rows.created_at DESC" in _executed_sql(mock_session)

    @pytest.mark.asyncio
    async def test_get_all_should_skip_none_filters(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test a None filter value does not narrow the listing."""
        mock_session.execute = AsyncMock(return_value=_scalars_result([]))

        await base_crud.get_all(mock_session, status=None)

        assert "WHERE" not in _executed_sql(mock_session)

    @pytest.mark.asyncio
    async def test_get_all_should_apply_filters_limit_and_offset(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_session.execute = AsyncMock(return_value=_scalars_result([]))

        await base_crud.get_all(mock_session, limit=10, offset=20, status="published")

        sql = _executed_sql(mock_session)
        assert "crud_sample_rows.status = 'published'" in sql
        assert "LIMIT 10" in sql
        assert "OFFSET 20" in sql

    @pytest.mark.asyncio
    async def test_get_all_should_not_order_untimed_models(
        self, mock_session: AsyncSession
    ) -> None:
        mock_session.execute = AsyncMock(return_value=_scalars_result([]))

        await BaseCRUD(UntimedSampleModel).get_all(mock_session)

        assert "ORDER BY" not in _executed_sql(mock_session)


class TestBaseCRUDCount:
    """Test suite for BaseCRUD.count() method."""

    @pytest.mark.asyncio
    async def test_count_should_return_integer_total(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one = MagicMock(return_value=7)
        mock_session.execute = AsyncMock(return_value=mock_result)

        total = await base_crud.count(mock_session, status="published")

        assert total == 7
        assert "crud_sample_rows.status = 'published'" in _executed_sql(mock_session)


class TestBaseCRUDUpdateByID:
    """Test suite for BaseCRUD.update_by_id() method."""

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_updated_model_when_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        updated_instance = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=updated_instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.update_by_id(mock_session, sample_id, status="archived")

        assert result is updated_instance
        assert "UPDATE crud_sample_rows" in _executed_sql(mock_session, literal=False)

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.update_by_id(mock_session, sample_id, status="x") is None

    @pytest.mark.asyncio
    async def test_update_by_id_without_fields_should_read_current_row(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        """Test an empty update issues a SELECT instead of an UPDATE."""
        current = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=current)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await base_crud.update_by_id(mock_session, sample_id)

        assert result is current
        assert _executed_sql(mock_session, literal=False).startswith("SELECT")


class TestBaseCRUDDeleteByID:
    """Test suite for BaseCRUD.delete_by_id() method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
    async def test_delete_by_id_should_report_rowcount(
        self,
        base_crud: BaseCRUD,
        mock_session: AsyncSession,
        sample_id: uuid.UUID,
        rowcount: int,
        expected: bool,
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = rowcount
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.delete_by_id(mock_session, sample_id) is expected


class TestBaseCRUDExists:
    """Test suite for BaseCRUD.exists() method."""

    @pytest.mark.asyncio
    async def test_exists_should_return_true_when_id_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=sample_id)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.exists(mock_session, sample_id) is True

    @pytest.mark.asyncio
    async def test_exists_should_return_false_when_id_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await base_crud.exists(mock_session, sample_id) is False
