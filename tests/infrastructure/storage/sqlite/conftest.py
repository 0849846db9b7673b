"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from voucher_ledger.infrastructure.storage.sqlite.connection import ConnectionPool


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def pool(temp_db_path: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Initialized pool over a temporary database, closed after the test."""
    pool = ConnectionPool(temp_db_path)
    await pool.initialize()
    yield pool
    await pool.close()
