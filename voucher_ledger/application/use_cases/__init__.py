"""Application use cases."""

from voucher_ledger.application.use_cases.add_provider import AddProviderUseCase
from voucher_ledger.application.use_cases.add_stock import AddStockUseCase
from voucher_ledger.application.use_cases.complete_sale import CompleteSaleUseCase
from voucher_ledger.application.use_cases.delete_provider import DeleteProviderUseCase
from voucher_ledger.application.use_cases.delete_voucher import DeleteVoucherUseCase
from voucher_ledger.application.use_cases.generate_report import (
    GeneratedReport,
    GenerateReportUseCase,
)
from voucher_ledger.application.use_cases.import_vouchers import ImportVouchersUseCase
from voucher_ledger.application.use_cases.inventory_overview import (
    InventoryOverview,
    InventoryOverviewUseCase,
)
from voucher_ledger.application.use_cases.save_voucher import SaveVoucherUseCase

__all__ = [
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
]
