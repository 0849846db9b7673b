"""SQLite implementation of keyed collection storage."""

import json
from datetime import UTC, datetime
from typing import Any

import aiosqlite

from voucher_ledger.config import get_logger
from voucher_ledger.core.exceptions import DatabaseError
from voucher_ledger.core.interfaces.collection_store import ICollectionStore
from voucher_ledger.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    get_pool,
)

logger = get_logger(__name__)


class SQLiteCollectionStore(ICollectionStore):
    """Stores each collection as one JSON document row."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def load(self, key: str, default: Any = None) -> Any:
        """Load a collection; undecodable payloads fall back to default."""
        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                cursor = await conn.execute(
                    "SELECT payload FROM collections WHERE name = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("load", str(e)) from e

        if row is None:
            return default

        try:
            return json.loads(row["payload"])
        except (TypeError, ValueError) as e:
            logger.error("collection_payload_invalid", key=key, error=str(e))
            return default

    async def save(self, key: str, value: Any) -> None:
        """Replace a collection."""
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise DatabaseError("save", f"{key} is not JSON serializable: {e}") from e

        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO collections (name, payload, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(name) DO UPDATE SET
                        payload = excluded.payload,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload, datetime.now(UTC).isoformat()),
                )
        except aiosqlite.Error as e:
            raise DatabaseError("save", str(e)) from e

        logger.debug("collection_saved", key=key, size=len(payload))
