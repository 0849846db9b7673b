"""Request DTOs for use cases.

Pydantic v2 models validated at the edge, before a use case runs. Numeric
form input for quantities is accepted as typed text so the operation itself
can reject malformed values.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from voucher_ledger.core.entities.inventory import VoucherKey
from voucher_ledger.infrastructure.reports.kinds import ReportFormat, ReportKind


class AddProviderRequest(BaseModel):
    """Request to add a provider."""

    name: str = Field(..., description="Display name", examples=["Telkomsel"])
    logo_url: str | None = Field(default=None, description="Logo image URL")
    provider_id: int | None = Field(
        default=None,
        description="Explicit id; next free id when omitted",
    )


class SaveVoucherRequest(BaseModel):
    """Voucher form submission, used for both create and edit."""

    provider_id: int = Field(..., description="Owning provider id")
    name: str = Field(..., min_length=1, examples=["10GB / 30 Days"])
    total_stock: int = Field(default=0, ge=0)
    remaining_stock: int = Field(default=0, ge=0)
    cost_price: int = Field(default=0, ge=0, description="Whole Rupiah")
    sell_price: int | None = Field(
        default=None,
        ge=0,
        description="Manual sell price; derived from the cost price when omitted",
    )
    planned_stock: int = Field(default=0, ge=0, description="Pending restock target")


class VoucherRefRequest(BaseModel):
    """Identifies a voucher by its natural key."""

    provider_id: int
    name: str = Field(..., min_length=1)

    @property
    def key(self) -> VoucherKey:
        return VoucherKey(provider_id=self.provider_id, name=self.name)


class AddStockRequest(VoucherRefRequest):
    """Request to add received units to a voucher."""

    quantity: int | str = Field(..., description="Units received, as entered")


class CartLineRequest(VoucherRefRequest):
    """One line of a sale cart."""

    quantity: int | str = Field(..., description="Units sold, as entered")


class CompleteSaleRequest(BaseModel):
    """A sale cart, processed in line order."""

    lines: list[CartLineRequest] = Field(default_factory=list)


class ImportVouchersRequest(BaseModel):
    """Bulk import from in-memory rows or a CSV export."""

    rows: list[list[Any]] = Field(
        default_factory=list,
        description="(provider_id, name, total, remaining, cost, sell, planned)",
    )
    csv_path: Path | None = Field(default=None, description="CSV file with a header line")
    first_row_number: int = Field(
        default=1,
        ge=1,
        description="Row number reported for the first in-memory row",
    )


class DeleteProviderRequest(BaseModel):
    """Request to delete a provider and all of its vouchers."""

    provider_id: int


class GenerateReportRequest(BaseModel):
    """Request for a report projection."""

    kind: ReportKind = ReportKind.FULL
    format: ReportFormat = ReportFormat.TEXT
