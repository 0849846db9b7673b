"""Storage infrastructure implementations."""

from voucher_ledger.infrastructure.storage.memory import MemoryCollectionStore
from voucher_ledger.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteCollectionStore,
    close_pool,
    get_collection_store,
    get_pool,
)

__all__ = [
    "MemoryCollectionStore",
    "SQLiteCollectionStore",
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_collection_store",
]
