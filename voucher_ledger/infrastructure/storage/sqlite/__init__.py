"""SQLite storage implementations."""

from voucher_ledger.infrastructure.storage.sqlite.collection_store import (
    SQLiteCollectionStore,
)
from voucher_ledger.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)

# Singleton instance
_collection_store: SQLiteCollectionStore | None = None


async def get_collection_store() -> SQLiteCollectionStore:
    """Get singleton collection store instance."""
    global _collection_store
    if _collection_store is None:
        _collection_store = SQLiteCollectionStore()
    return _collection_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    # Store classes
    "SQLiteCollectionStore",
    # Factory functions
    "get_collection_store",
]
