"""PDF generation infrastructure."""

from voucher_ledger.infrastructure.pdf.receipt_pdf import (
    IReceiptPdfRenderer,
    ThermalReceiptPdfRenderer,
)

__all__ = [
    "IReceiptPdfRenderer",
    "ThermalReceiptPdfRenderer",
]
