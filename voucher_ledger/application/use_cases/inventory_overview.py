"""Inventory Overview Use Case: Dashboard totals and recent activity."""

from dataclasses import dataclass, field

from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.core.entities.activity import ActivityLogEntry
from voucher_ledger.core.entities.inventory import Voucher
from voucher_ledger.core.services.inventory_summary import InventorySummary, summarize


@dataclass
class InventoryOverview:
    summary: InventorySummary
    recent_activity: list[ActivityLogEntry] = field(default_factory=list)
    orphaned_vouchers: list[Voucher] = field(default_factory=list)


class InventoryOverviewUseCase(LedgerUseCase):
    """Summarize stock value, sales and profit across all providers."""

    async def execute(self, recent: int = 10) -> InventoryOverview:
        session = await self._get_session()
        ledger = session.ledger
        return InventoryOverview(
            summary=summarize(ledger.providers, ledger.vouchers),
            recent_activity=list(session.activity_log.entries[:recent]),
            orphaned_vouchers=ledger.orphaned_vouchers(),
        )
