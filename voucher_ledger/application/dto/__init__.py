"""Data transfer objects for use cases."""

from voucher_ledger.application.dto.requests import (
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

__all__ = [
    "AddProviderRequest",
    "AddStockRequest",
    "CartLineRequest",
    "CompleteSaleRequest",
    "DeleteProviderRequest",
    "GenerateReportRequest",
    "ImportVouchersRequest",
    "SaveVoucherRequest",
    "VoucherRefRequest",
]
