"""Add Stock Use Case: Restock a voucher and consume its planned target."""

from voucher_ledger.application.dto.requests import AddStockRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.outcome import Outcome

logger = get_logger(__name__)


class AddStockUseCase(LedgerUseCase):
    """Add received units to a voucher."""

    async def execute(self, request: AddStockRequest) -> Outcome:
        session = await self._get_session()
        logger.info("add_stock_started", key=str(request.key), quantity=request.quantity)

        outcome = session.operations.add_stock(request.key, request.quantity)
        if outcome.applied:
            await session.save()
        else:
            logger.info("add_stock_not_applied", status=outcome.status.value, reason=outcome.reason)
        return outcome
