"""Import Vouchers Use Case: Bulk upsert from rows or a CSV export."""

from voucher_ledger.application.dto.requests import ImportVouchersRequest
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.outcome import ImportResult, ImportRowError
from voucher_ledger.infrastructure.importers import FIRST_DATA_ROW, read_csv_rows

logger = get_logger(__name__)


class ImportVouchersUseCase(LedgerUseCase):
    """Upsert vouchers row by row, collecting per-row errors."""

    async def execute(self, request: ImportVouchersRequest) -> ImportResult:
        session = await self._get_session()

        if request.csv_path is not None:
            logger.info("import_started", source=str(request.csv_path))
            try:
                rows = list(read_csv_rows(request.csv_path))
            except (OSError, UnicodeDecodeError) as e:
                logger.error("import_file_unreadable", path=str(request.csv_path), error=str(e))
                return ImportResult(
                    errors=[ImportRowError(row_number=0, message=f"cannot read file: {e}")]
                )
            first_row_number = FIRST_DATA_ROW
        else:
            logger.info("import_started", source="rows", rows=len(request.rows))
            rows = request.rows
            first_row_number = request.first_row_number

        result = session.operations.import_rows(rows, first_row_number=first_row_number)
        if result.succeeded:
            await session.save()
        return result
