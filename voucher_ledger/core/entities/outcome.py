"""Outcome values returned by ledger operations instead of silent no-ops."""

from dataclasses import dataclass, field
from enum import Enum

from voucher_ledger.core.entities.activity import ActivityLogEntry
from voucher_ledger.core.entities.inventory import Provider, Voucher, VoucherKey


class OutcomeStatus(str, Enum):
    """How a single unit of work ended."""

    APPLIED = "applied"
    SKIPPED = "skipped"  # referential miss or tolerated no-op
    REJECTED = "rejected"  # validation failure


@dataclass
class Outcome:
    """Result of a single-record operation."""

    status: OutcomeStatus
    reason: str | None = None
    voucher: Voucher | None = None
    provider: Provider | None = None
    entry: ActivityLogEntry | None = None

    @property
    def applied(self) -> bool:
        return self.status is OutcomeStatus.APPLIED

    @classmethod
    def skipped(cls, reason: str) -> "Outcome":
        return cls(status=OutcomeStatus.SKIPPED, reason=reason)

    @classmethod
    def rejected(cls, reason: str) -> "Outcome":
        return cls(status=OutcomeStatus.REJECTED, reason=reason)


@dataclass
class SaleLine:
    """One cart line after validation."""

    key: VoucherKey
    quantity: int
    status: OutcomeStatus
    reason: str | None = None
    unit_price: int = 0
    line_total: int = 0
    name: str | None = None


@dataclass
class SaleResult:
    """Result of completing a sale cart."""

    lines: list[SaleLine] = field(default_factory=list)
    total: int = 0
    entry: ActivityLogEntry | None = None

    @property
    def applied_lines(self) -> list[SaleLine]:
        return [line for line in self.lines if line.status is OutcomeStatus.APPLIED]

    @property
    def skipped_lines(self) -> list[SaleLine]:
        return [line for line in self.lines if line.status is not OutcomeStatus.APPLIED]

    @property
    def succeeded(self) -> bool:
        """A sale fails only when no line could be applied."""
        return bool(self.applied_lines)


@dataclass
class ImportRowError:
    """A bulk import row that was skipped."""

    row_number: int
    message: str


@dataclass
class ImportResult:
    """Result of a bulk voucher import."""

    applied: list[Voucher] = field(default_factory=list)
    errors: list[ImportRowError] = field(default_factory=list)
    created_providers: list[Provider] = field(default_factory=list)
    entry: ActivityLogEntry | None = None

    @property
    def applied_count(self) -> int:
        return len(self.applied)

    @property
    def succeeded(self) -> bool:
        return self.applied_count > 0
