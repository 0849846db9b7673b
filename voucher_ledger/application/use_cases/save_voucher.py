"""Save Voucher Use Case: Create or edit through upsert-by-key."""

from voucher_ledger.application.dto.requests import SaveVoucherRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.inventory import Voucher
from voucher_ledger.core.entities.outcome import Outcome

logger = get_logger(__name__)


class SaveVoucherUseCase(LedgerUseCase):
    """Apply a voucher form submission."""

    async def execute(self, request: SaveVoucherRequest) -> Outcome:
        session = await self._get_session()
        derive_sell_price = request.sell_price is None
        voucher = Voucher(
            **request.model_dump(exclude={"sell_price"}),
            sell_price=request.sell_price or 0,
        )

        outcome = session.operations.save_voucher(voucher, derive_sell_price=derive_sell_price)
        if outcome.applied:
            await session.save()
        else:
            logger.info("save_voucher_rejected", key=str(voucher.key), reason=outcome.reason)
        return outcome
