"""Delete Voucher Use Case."""

from voucher_ledger.application.dto.requests import VoucherRefRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.core.entities.outcome import Outcome


class DeleteVoucherUseCase(LedgerUseCase):
    """Delete a voucher by its natural key; unknown keys are a no-op."""

    async def execute(self, request: VoucherRefRequest) -> Outcome:
        session = await self._get_session()
        outcome = session.operations.delete_voucher(request.key)
        if outcome.applied:
            await session.save()
        return outcome
