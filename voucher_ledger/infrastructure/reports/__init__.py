"""Read-only report projections of the ledger."""

from voucher_ledger.infrastructure.reports.kinds import ReportFormat, ReportKind
from voucher_ledger.infrastructure.reports.receipt_html import (
    render_full_receipt,
    render_short_receipt,
)
from voucher_ledger.infrastructure.reports.text_report import render_full, render_short

__all__ = [
    "ReportKind",
    "ReportFormat",
    "render_full",
    "render_short",
    "render_full_receipt",
    "render_short_receipt",
]
