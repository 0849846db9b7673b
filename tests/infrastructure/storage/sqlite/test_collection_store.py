"""Tests for SQLiteCollectionStore."""

import pytest

from voucher_ledger.core.exceptions import DatabaseError
from voucher_ledger.infrastructure.storage.sqlite.collection_store import SQLiteCollectionStore
from voucher_ledger.infrastructure.storage.sqlite.connection import ConnectionPool


class TestSQLiteCollectionStore:
    """Tests for keyed JSON collections in SQLite."""

    async def test_load_missing_returns_default(self, pool: ConnectionPool):
        store = SQLiteCollectionStore(pool)
        assert await store.load("providers") is None
        assert await store.load("providers", []) == []

    async def test_save_and_load(self, pool: ConnectionPool):
        store = SQLiteCollectionStore(pool)
        payload = [{"id": 1, "name": "Telkomsel", "logo_url": None}]

        await store.save("providers", payload)

        assert await store.load("providers") == payload

    async def test_save_replaces(self, pool: ConnectionPool):
        store = SQLiteCollectionStore(pool)
        await store.save("vouchers", [1])
        await store.save("vouchers", [2, 3])

        assert await store.load("vouchers") == [2, 3]
        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM collections")
            assert (await cursor.fetchone())[0] == 1

    async def test_non_ascii_round_trip(self, pool: ConnectionPool):
        store = SQLiteCollectionStore(pool)
        await store.save("activity_logs", [{"message": 'Voucher "Kuota ✓" added.'}])
        assert (await store.load("activity_logs"))[0]["message"] == 'Voucher "Kuota ✓" added.'

    async def test_invalid_payload_returns_default(self, pool: ConnectionPool):
        async with pool.transaction() as conn:
            await conn.execute(
                "INSERT INTO collections (name, payload, updated_at) VALUES ('vouchers', '{oops', 'now')"
            )
        store = SQLiteCollectionStore(pool)

        assert await store.load("vouchers", []) == []

    async def test_unserializable_value(self, pool: ConnectionPool):
        store = SQLiteCollectionStore(pool)
        with pytest.raises(DatabaseError):
            await store.save("vouchers", [object()])

    async def test_persists_across_pools(self, temp_db_path):
        first = ConnectionPool(temp_db_path)
        await SQLiteCollectionStore(first).save("providers", [{"id": 1}])
        await first.close()

        second = ConnectionPool(temp_db_path)
        try:
            assert await SQLiteCollectionStore(second).load("providers") == [{"id": 1}]
        finally:
            await second.close()
