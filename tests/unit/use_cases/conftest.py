"""Fixtures for use case tests."""

from unittest.mock import AsyncMock

import pytest

from voucher_ledger.application.session import LedgerSession
from voucher_ledger.core.entities.inventory import Voucher


@pytest.fixture
def mock_store():
    """Create a mock collection store with nothing stored."""
    store = AsyncMock()
    store.load = AsyncMock(return_value=None)
    store.save = AsyncMock(return_value=None)
    return store


@pytest.fixture
async def session(mock_store) -> LedgerSession:
    """A loaded session over the default providers with two vouchers."""
    session = LedgerSession(store=mock_store)
    await session.load()
    session.ledger.upsert_voucher(
        Voucher(
            provider_id=1,
            name="5GB / 7 Days",
            total_stock=10,
            remaining_stock=10,
            cost_price=22000,
            sell_price=25000,
        )
    )
    session.ledger.upsert_voucher(
        Voucher(
            provider_id=2,
            name="10GB / 30 Days",
            total_stock=4,
            remaining_stock=1,
            cost_price=47000,
            sell_price=50000,
            planned_stock=6,
        )
    )
    return session
