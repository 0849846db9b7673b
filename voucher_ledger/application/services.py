"""
Service factory functions for dependency injection.

Wires the SQLite collection store and configured pricing into a loaded
LedgerSession. Use cases fall back to this factory when no session is
injected.
"""

from typing import TYPE_CHECKING

from voucher_ledger.application.session import LedgerSession
from voucher_ledger.config import configure_logging, get_settings
from voucher_ledger.core.services.pricing import PricingRule

if TYPE_CHECKING:
    from voucher_ledger.core.interfaces import ICollectionStore


# Singleton session instance
_ledger_session: LedgerSession | None = None


async def get_ledger_session(
    store: "ICollectionStore | None" = None,
) -> LedgerSession:
    """
    Get or create the loaded LedgerSession.

    Args:
        store: Optional collection store override; an override always builds
            a fresh, non-cached session.

    Returns:
        LedgerSession with its collections loaded
    """
    global _ledger_session

    if _ledger_session is not None and store is None:
        return _ledger_session

    settings = get_settings()

    if store is None:
        # Lazy import infrastructure to keep the application layer importable alone
        from voucher_ledger.infrastructure.storage.sqlite import get_collection_store

        configure_logging()
        store = await get_collection_store()
        cache = True
    else:
        cache = False

    session = LedgerSession(
        store=store,
        pricing=PricingRule.from_settings(settings.pricing),
        seed_default_providers=settings.ledger.seed_default_providers,
    )
    await session.load()

    if cache:
        _ledger_session = session
    return session


def reset_services() -> None:
    """Reset singleton instances (for testing)."""
    global _ledger_session
    _ledger_session = None
