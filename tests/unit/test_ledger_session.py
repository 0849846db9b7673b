"""Tests for LedgerSession load and save."""

from unittest.mock import AsyncMock

from voucher_ledger.application.session import (
    ACTIVITY_KEY,
    DEFAULT_PROVIDERS,
    PROVIDERS_KEY,
    VOUCHERS_KEY,
    LedgerSession,
)
from voucher_ledger.core.entities.inventory import VoucherKey
from voucher_ledger.core.exceptions import DatabaseError
from voucher_ledger.core.services.pricing import PricingRule
from voucher_ledger.infrastructure.storage.memory import MemoryCollectionStore


class TestLoad:
    """Tests for LedgerSession.load()."""

    async def test_seeds_default_providers(self):
        session = LedgerSession(MemoryCollectionStore())
        await session.load()

        assert session.loaded
        assert [p.name for p in session.ledger.providers] == [
            "Telkomsel",
            "IM3",
            "Three",
            "XL",
            "Axis",
            "Smartfren",
            "By.U",
        ]
        assert session.ledger.vouchers == []
        assert len(session.activity_log) == 0

    async def test_seeded_providers_carry_logos(self):
        session = LedgerSession(MemoryCollectionStore())
        await session.load()

        logos = {p.name: p.logo_url for p in session.ledger.providers}
        assert all(logos.values())
        assert logos["XL"].endswith("xl-axiata-telecom-symbol-free-png.png")
        assert logos["By.U"] == "https://bigrit.com/wp-content/uploads/2020/11/byu.png"

    async def test_seeding_disabled(self):
        session = LedgerSession(MemoryCollectionStore(), seed_default_providers=False)
        await session.load()
        assert session.ledger.providers == []

    async def test_stored_empty_provider_list_not_reseeded(self):
        session = LedgerSession(MemoryCollectionStore({PROVIDERS_KEY: []}))
        await session.load()
        assert session.ledger.providers == []

    async def test_loads_stored_collections(self):
        store = MemoryCollectionStore(
            {
                PROVIDERS_KEY: [{"id": 4, "name": "XL", "logo_url": None}],
                VOUCHERS_KEY: [
                    {
                        "provider_id": 4,
                        "name": "2GB / 3 Days",
                        "total_stock": 5,
                        "remaining_stock": 2,
                        "cost_price": 8000,
                        "sell_price": 11000,
                        "planned_stock": 0,
                    }
                ],
                ACTIVITY_KEY: [
                    {"id": 1, "timestamp": "2024-05-01T09:00:00Z", "kind": "EDIT", "message": "a"},
                    {"id": 2, "timestamp": "2024-05-01T09:01:00Z", "kind": "SALE", "message": "b"},
                ],
            }
        )
        session = LedgerSession(store)
        await session.load()

        assert session.ledger.find_voucher(VoucherKey(provider_id=4, name="2GB / 3 Days")).sold == 3
        assert [e.id for e in session.activity_log.entries] == [2, 1]

    async def test_invalid_records_dropped(self):
        store = MemoryCollectionStore(
            {
                PROVIDERS_KEY: [{"id": 1, "name": "XL"}, {"id": "x"}],
                VOUCHERS_KEY: [{"provider_id": 1, "name": "A", "total_stock": -3}],
                ACTIVITY_KEY: {"not": "a list"},
            }
        )
        session = LedgerSession(store)
        await session.load()

        assert [p.id for p in session.ledger.providers] == [1]
        assert session.ledger.vouchers == []
        assert len(session.activity_log) == 0

    async def test_load_failure_treated_as_absent(self):
        store = AsyncMock()
        store.load = AsyncMock(side_effect=DatabaseError("load", "disk I/O error"))

        session = LedgerSession(store)
        await session.load()

        assert len(session.ledger.providers) == len(DEFAULT_PROVIDERS)

    async def test_operations_bound_to_loaded_ledger(self):
        session = LedgerSession(MemoryCollectionStore(), pricing=PricingRule(markup=1000))
        await session.load()

        assert session.operations.ledger is session.ledger
        assert session.operations.activity_log is session.activity_log
        assert session.pricing.markup == 1000


class TestSave:
    """Tests for LedgerSession.save()."""

    async def test_round_trip(self):
        store = MemoryCollectionStore()
        session = LedgerSession(store)
        await session.load()
        session.operations.import_rows([(1, "5GB / 7 Days", 10, 8, 22000)])

        assert await session.save() is True

        reloaded = LedgerSession(store)
        await reloaded.load()
        voucher = reloaded.ledger.find_voucher(VoucherKey(provider_id=1, name="5GB / 7 Days"))
        assert voucher.remaining_stock == 8
        assert voucher.sell_price == 25000
        assert reloaded.activity_log.entries == session.activity_log.entries
        assert sorted(store.keys()) == sorted([PROVIDERS_KEY, VOUCHERS_KEY, ACTIVITY_KEY])

    async def test_failed_save_keeps_memory(self):
        store = AsyncMock()
        store.load = AsyncMock(return_value=None)
        store.save = AsyncMock(side_effect=DatabaseError("save", "database is locked"))
        session = LedgerSession(store)
        await session.load()
        session.operations.add_provider("Indosat")

        assert await session.save() is False
        assert store.save.await_count == 3
        assert session.ledger.find_provider(8).name == "Indosat"

    async def test_partial_failure(self):
        store = AsyncMock()
        store.load = AsyncMock(return_value=None)
        store.save = AsyncMock(side_effect=[None, DatabaseError("save", "full"), None])
        session = LedgerSession(store)
        await session.load()

        assert await session.save() is False
        assert store.save.await_count == 3
