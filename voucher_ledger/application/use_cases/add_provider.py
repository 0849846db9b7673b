"""Add Provider Use Case."""

from voucher_ledger.application.dto.requests import AddProviderRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.outcome import Outcome

logger = get_logger(__name__)


class AddProviderUseCase(LedgerUseCase):
    """Add a provider, auto-assigning its id when none is given."""

    async def execute(self, request: AddProviderRequest) -> Outcome:
        session = await self._get_session()
        outcome = session.operations.add_provider(
            name=request.name,
            logo_url=request.logo_url,
            provider_id=request.provider_id,
        )
        if outcome.applied:
            await session.save()
        else:
            logger.info("add_provider_not_applied", status=outcome.status.value, reason=outcome.reason)
        return outcome
