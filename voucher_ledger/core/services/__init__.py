"""Core domain services."""

from voucher_ledger.core.services.activity_log import ActivityLog
from voucher_ledger.core.services.inventory_summary import (
    InventorySummary,
    ProviderSummary,
    summarize,
)
from voucher_ledger.core.services.ledger import InventoryLedger, ProviderRemoval
from voucher_ledger.core.services.pricing import PricingRule, calculate_auto_sell_price
from voucher_ledger.core.services.stock_operations import StockOperations

__all__ = [
    "ActivityLog",
    "InventoryLedger",
    "ProviderRemoval",
    "PricingRule",
    "calculate_auto_sell_price",
    "StockOperations",
    "InventorySummary",
    "ProviderSummary",
    "summarize",
]
