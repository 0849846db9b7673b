"""Delete Provider Use Case: Cascades to the provider's vouchers."""

from voucher_ledger.application.dto.requests import DeleteProviderRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.core.entities.outcome import Outcome


class DeleteProviderUseCase(LedgerUseCase):
    """Delete a provider together with all of its vouchers."""

    async def execute(self, request: DeleteProviderRequest) -> Outcome:
        session = await self._get_session()
        outcome = session.operations.delete_provider(request.provider_id)
        if outcome.applied:
            await session.save()
        return outcome
