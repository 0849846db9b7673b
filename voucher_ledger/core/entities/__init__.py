"""Core domain entities."""

from voucher_ledger.core.entities.activity import ActivityKind, ActivityLogEntry
from voucher_ledger.core.entities.inventory import (
    Provider,
    Voucher,
    VoucherKey,
    normalize_voucher_name,
)
from voucher_ledger.core.entities.outcome import (
    ImportResult,
    ImportRowError,
    Outcome,
    OutcomeStatus,
    SaleLine,
    SaleResult,
)

__all__ = [
    # Inventory entities
    "Provider",
    "Voucher",
    "VoucherKey",
    "normalize_voucher_name",
    # Activity entities
    "ActivityKind",
    "ActivityLogEntry",
    # Outcomes
    "Outcome",
    "OutcomeStatus",
    "SaleLine",
    "SaleResult",
    "ImportResult",
    "ImportRowError",
]
