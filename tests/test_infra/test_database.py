"""Tests for database session handling."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.infra.database import create_tables, drop_tables, get_db_session


class TestGetDbSession:
    """Tests for the commit/rollback contract of get_db_session."""

    @pytest.fixture
    def mock_session(self) -> AsyncSession:
        return AsyncMock(spec=AsyncSession)

    @pytest.mark.asyncio
    async def test_commits_on_success(self, mock_session: AsyncSession):
        factory = MagicMock(return_value=mock_session)

        with patch("app.infra.database.get_session_factory", return_value=factory):
            async with get_db_session() as session:
                assert session is mock_session

        mock_session.commit.assert_awaited_once()
        mock_session.rollback.assert_not_awaited()
        mock_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises_on_error(self, mock_session: AsyncSession):
        factory = MagicMock(return_value=mock_session)

        with patch("app.infra.database.get_session_factory", return_value=factory):
            with pytest.raises(RuntimeError, match="boom"):
                async with get_db_session():
                    raise RuntimeError("boom")

        mock_session.commit.assert_not_awaited()
        mock_session.rollback.assert_awaited_once()
        mock_session.close.assert_awaited_once()


class TestSchema:
    """Tests for table management against SQLite."""

    @pytest.mark.asyncio
    async def test_create_tables_creates_catalog_tables(self, engine: AsyncEngine):
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert set(tables) == {"categories", "products"}

    @pytest.mark.asyncio
    async def test_drop_and_recreate(self, engine: AsyncEngine):
        await drop_tables(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert tables == []

        await create_tables(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert set(tables) == {"categories", "products"}

    @pytest.mark.asyncio
    async def test_sqlite_foreign_keys_enforced(self, engine: AsyncEngine):
        async with engine.connect() as conn:
            result = await conn.execute(text("PRAGMA foreign_keys"))

        assert result.scalar() == 1


def test_infra_exports_only_used_helpers():
    import app.infra

    assert set(app.infra.__all__) == {
        "get_db_session",
        "close_db_engine",
        "create_tables",
        "setup_logging",
        "get_logger",
    }
    assert not hasattr(app.infra.database, "DatabaseSession")
