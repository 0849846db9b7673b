"""Tests for MemoryCollectionStore."""

import pytest

from voucher_ledger.core.exceptions import DatabaseError
from voucher_ledger.infrastructure.storage.memory import MemoryCollectionStore


class TestMemoryCollectionStore:
    async def test_initial_data(self):
        store = MemoryCollectionStore({"providers": [{"id": 1, "name": "XL"}]})
        assert await store.load("providers") == [{"id": 1, "name": "XL"}]
        assert store.keys() == ["providers"]

    async def test_missing_key_default_is_copied(self):
        store = MemoryCollectionStore()
        default: list = []
        loaded = await store.load("vouchers", default)
        loaded.append(1)
        assert default == []

    async def test_saved_value_does_not_alias(self):
        store = MemoryCollectionStore()
        value = [{"id": 1}]
        await store.save("providers", value)
        value[0]["id"] = 2
        assert await store.load("providers") == [{"id": 1}]

    async def test_unserializable_value(self):
        with pytest.raises(DatabaseError):
            await MemoryCollectionStore().save("x", {1, 2})
