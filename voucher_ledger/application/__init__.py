"""
Application layer - Use cases, DTOs, the ledger session and service factories.

Use cases validate nothing themselves: requests arrive as DTOs, operations
run against the session's ledger, and the session persists the result.
"""

from voucher_ledger.application.dto import (
    AddProviderRequest,
    AddStockRequest,
    CartLineRequest,
    CompleteSaleRequest,
    DeleteProviderRequest,
    GenerateReportRequest,
    ImportVouchersRequest,
    SaveVoucherRequest,
    VoucherRefRequest,
)
from voucher_ledger.application.services import get_ledger_session, reset_services
from voucher_ledger.application.session import DEFAULT_PROVIDERS, LedgerSession
from voucher_ledger.application.use_cases import (
    AddProviderUseCase,
    AddStockUseCase,
    CompleteSaleUseCase,
    DeleteProviderUseCase,
    DeleteVoucherUseCase,
    GeneratedReport,
    GenerateReportUseCase,
    ImportVouchersUseCase,
    InventoryOverview,
    InventoryOverviewUseCase,
    SaveVoucherUseCase,
)

__all__ = [
    # Request DTOs
    "AddProviderRequest",
    "AddStockRequest",
    "CartLineRequest",
    "CompleteSaleRequest",
    "DeleteProviderRequest",
    "GenerateReportRequest",
    "ImportVouchersRequest",
    "SaveVoucherRequest",
    "VoucherRefRequest",
    # Session
    "LedgerSession",
    "DEFAULT_PROVIDERS",
    # Use Cases
    "AddProviderUseCase",
    "SaveVoucherUseCase",
    "AddStockUseCase",
    "CompleteSaleUseCase",
    "ImportVouchersUseCase",
    "DeleteVoucherUseCase",
    "DeleteProviderUseCase",
    "GenerateReportUseCase",
    "GeneratedReport",
    "InventoryOverviewUseCase",
    "InventoryOverview",
    # Service factories
    "get_ledger_session",
    "reset_services",
]
