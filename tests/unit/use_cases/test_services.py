"""Unit tests for application service factories."""

from voucher_ledger.application.services import get_ledger_session
from voucher_ledger.config import reset_settings
from voucher_ledger.infrastructure.storage.memory import MemoryCollectionStore


class TestGetLedgerSession:
    async def test_store_override_builds_loaded_session(self):
        store = MemoryCollectionStore()

        session = await get_ledger_session(store=store)

        assert session.loaded
        assert len(session.ledger.providers) == 7

    async def test_store_override_not_cached(self):
        first = await get_ledger_session(store=MemoryCollectionStore())
        second = await get_ledger_session(store=MemoryCollectionStore())

        assert first is not second

    async def test_pricing_from_settings(self, monkeypatch):
        monkeypatch.setenv("PRICING_MARKUP", "2000")
        reset_settings()
        session = await get_ledger_session(store=MemoryCollectionStore())

        assert session.pricing.markup == 2000
