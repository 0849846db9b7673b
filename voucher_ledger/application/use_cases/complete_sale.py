"""Complete Sale Use Case: Per-line tolerant stock deduction."""

from voucher_ledger.application.dto.requests import CompleteSaleRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.outcome import SaleResult

logger = get_logger(__name__)


class CompleteSaleUseCase(LedgerUseCase):
    """Sell a cart; lines that cannot be fulfilled are skipped."""

    async def execute(self, request: CompleteSaleRequest) -> SaleResult:
        session = await self._get_session()
        logger.info("complete_sale_started", lines=len(request.lines))

        cart = [(line.key, line.quantity) for line in request.lines]
        result = session.operations.complete_sale(cart)

        if result.succeeded:
            await session.save()
        return result
