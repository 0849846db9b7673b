"""Shared plumbing for ledger use cases."""

from voucher_ledger.application.session import LedgerSession


class LedgerUseCase:
    """Base for use cases that run against the ledger session."""

    def __init__(self, session: LedgerSession | None = None):
        self._session = session

    async def _get_session(self) -> LedgerSession:
        if self._session is None:
            from voucher_ledger.application.services import get_ledger_session

            self._session = await get_ledger_session()
        return self._session
