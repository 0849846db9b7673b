"""Core interfaces (ports) for dependency injection."""

from voucher_ledger.core.interfaces.collection_store import ICollectionStore

__all__ = [
    # Storage interfaces
    "ICollectionStore",
]
