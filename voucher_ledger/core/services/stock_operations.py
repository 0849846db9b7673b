"""
Stock operations over the inventory ledger.

Every ledger mutation goes through this service so that each one is paired
with its activity log entry. Operations are tolerant: a bad cart line or
import row is skipped with a reason while the rest of the batch proceeds,
and only a batch where nothing applied is reported as failed.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.activity import ActivityKind
from voucher_ledger.core.entities.inventory import Provider, Voucher, VoucherKey
from voucher_ledger.core.entities.outcome import (
    ImportResult,
    ImportRowError,
    Outcome,
    OutcomeStatus,
    SaleLine,
    SaleResult,
)
from voucher_ledger.core.exceptions import ValidationError
from voucher_ledger.core.services.activity_log import ActivityLog
from voucher_ledger.core.services.coercion import coerce_positive
from voucher_ledger.core.services.formatting import format_rupiah
from voucher_ledger.core.services.ledger import InventoryLedger
from voucher_ledger.core.services.pricing import PricingRule
from voucher_ledger.core.services.voucher_import import (
    is_empty_row,
    parse_import_row,
)

logger = get_logger(__name__)

Cart = Mapping[VoucherKey, Any] | Iterable[tuple[VoucherKey, Any]]


class StockOperations:
    """Restock, sale, edit, import and delete operations with auditing."""

    def __init__(
        self,
        ledger: InventoryLedger,
        activity_log: ActivityLog,
        pricing: PricingRule | None = None,
    ) -> None:
        self._ledger = ledger
        self._log = activity_log
        self._pricing = pricing or PricingRule()

    @property
    def ledger(self) -> InventoryLedger:
        return self._ledger

    @property
    def activity_log(self) -> ActivityLog:
        return self._log

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    def add_provider(
        self,
        name: str,
        logo_url: str | None = None,
        provider_id: int | None = None,
    ) -> Outcome:
        """Add a provider, assigning max(existing id) + 1 when no id is given."""
        if provider_id is None:
            provider_id = self._ledger.next_provider_id()
        try:
            provider = Provider(id=provider_id, name=name, logo_url=logo_url or None)
        except PydanticValidationError:
            return Outcome.rejected("provider name is required")

        if not self._ledger.add_provider(provider):
            return Outcome.skipped(f"provider {provider_id} already exists")

        logger.info("provider_added", provider_id=provider.id, name=provider.name)
        return Outcome(status=OutcomeStatus.APPLIED, provider=provider)

    def delete_provider(self, provider_id: int) -> Outcome:
        """Delete a provider and, in the same step, all of its vouchers."""
        removal = self._ledger.delete_provider(provider_id)
        if removal is None:
            return Outcome.skipped(f"provider {provider_id} not found")

        entry = self._log.append(
            ActivityKind.DELETE_PROVIDER,
            f'Provider "{removal.provider.name}" and its '
            f"{len(removal.vouchers)} voucher(s) deleted.",
        )
        logger.info(
            "provider_deleted",
            provider_id=provider_id,
            cascaded_vouchers=len(removal.vouchers),
        )
        return Outcome(status=OutcomeStatus.APPLIED, provider=removal.provider, entry=entry)

    # ------------------------------------------------------------------
    # Vouchers
    # ------------------------------------------------------------------

    def save_voucher(self, data: Voucher, derive_sell_price: bool = False) -> Outcome:
        """
        Create or edit a voucher from form data.

        A submitted sell price is stored as given, also on create. With
        derive_sell_price (the form left the price empty) it is derived from
        the cost price when the voucher is new or its cost price changed, and
        the stored price is kept otherwise.
        """
        if not data.is_consistent:
            return Outcome.rejected(
                f"remaining stock {data.remaining_stock} exceeds "
                f"total stock {data.total_stock}"
            )

        existing = self._ledger.find_voucher(data.key)
        if derive_sell_price:
            if existing is None or existing.cost_price != data.cost_price:
                sell_price = self._pricing.derive(data.cost_price)
            else:
                sell_price = existing.sell_price
            data = data.model_copy(update={"sell_price": sell_price})

        created = self._ledger.upsert_voucher(data)
        action = "added" if created else "updated"
        entry = self._log.append(ActivityKind.EDIT, f'Voucher "{data.name}" {action}.')
        logger.info("voucher_saved", key=str(data.key), created=created)
        return Outcome(status=OutcomeStatus.APPLIED, voucher=data, entry=entry)

    def delete_voucher(self, key: VoucherKey) -> Outcome:
        removed = self._ledger.delete_voucher(key)
        if removed is None:
            return Outcome.skipped(f"voucher {key} not found")

        entry = self._log.append(
            ActivityKind.DELETE_VOUCHER, f'Voucher "{removed.name}" deleted.'
        )
        logger.info("voucher_deleted", key=str(key))
        return Outcome(status=OutcomeStatus.APPLIED, voucher=removed, entry=entry)

    # ------------------------------------------------------------------
    # Restock
    # ------------------------------------------------------------------

    def add_stock(self, key: VoucherKey, quantity: Any) -> Outcome:
        """
        Add received units to a voucher.

        Both stock counters grow by quantity and the planned restock target
        shrinks by it, never below zero.
        """
        try:
            amount = coerce_positive("quantity", quantity)
        except ValidationError as e:
            return Outcome.rejected(e.message)

        voucher = self._ledger.find_voucher(key)
        if voucher is None:
            return Outcome.skipped(f"voucher {key} not found")

        updated = voucher.model_copy(
            update={
                "total_stock": voucher.total_stock + amount,
                "remaining_stock": voucher.remaining_stock + amount,
                "planned_stock": max(0, voucher.planned_stock - amount),
            }
        )
        self._ledger.update_voucher(updated)

        entry = self._log.append(
            ActivityKind.ADD_STOCK, f'{amount} stock added to "{updated.name}".'
        )
        logger.info(
            "stock_added",
            key=str(key),
            quantity=amount,
            remaining=updated.remaining_stock,
            planned=updated.planned_stock,
        )
        return Outcome(status=OutcomeStatus.APPLIED, voucher=updated, entry=entry)

    # ------------------------------------------------------------------
    # Sale
    # ------------------------------------------------------------------

    def complete_sale(self, cart: Cart) -> SaleResult:
        """
        Sell the cart's lines in input order.

        Each line is validated on its own against the stock left by earlier
        lines of the same cart. Invalid lines are skipped; the sale fails only
        when no line applied, in which case the ledger is untouched.
        """
        lines = cart.items() if isinstance(cart, Mapping) else cart
        result = SaleResult()
        pending: dict[VoucherKey, Voucher] = {}

        for key, raw_quantity in lines:
            try:
                quantity = coerce_positive("quantity", raw_quantity)
            except ValidationError as e:
                result.lines.append(
                    SaleLine(key=key, quantity=0, status=OutcomeStatus.SKIPPED, reason=e.message)
                )
                continue

            voucher = pending[key] if key in pending else self._ledger.find_voucher(key)
            if voucher is None:
                result.lines.append(
                    SaleLine(
                        key=key,
                        quantity=quantity,
                        status=OutcomeStatus.SKIPPED,
                        reason="voucher not found",
                    )
                )
                continue

            if voucher.remaining_stock < quantity:
                result.lines.append(
                    SaleLine(
                        key=key,
                        quantity=quantity,
                        status=OutcomeStatus.SKIPPED,
                        reason=(
                            f"insufficient stock: requested {quantity}, "
                            f"available {voucher.remaining_stock}"
                        ),
                        name=voucher.name,
                    )
                )
                continue

            pending[key] = voucher.model_copy(
                update={"remaining_stock": voucher.remaining_stock - quantity}
            )
            line_total = voucher.sell_price * quantity
            result.total += line_total
            result.lines.append(
                SaleLine(
                    key=key,
                    quantity=quantity,
                    status=OutcomeStatus.APPLIED,
                    unit_price=voucher.sell_price,
                    line_total=line_total,
                    name=voucher.name,
                )
            )

        if not result.succeeded:
            logger.warning("sale_rejected", lines=len(result.lines))
            return result

        for voucher in pending.values():
            self._ledger.update_voucher(voucher)

        details = ", ".join(f"{line.quantity}x {line.name}" for line in result.applied_lines)
        result.entry = self._log.append(
            ActivityKind.SALE,
            f"Sale: {details} | Total: {format_rupiah(result.total)}.",
        )
        logger.info(
            "sale_completed",
            applied=len(result.applied_lines),
            skipped=len(result.skipped_lines),
            total=result.total,
        )
        return result

    # ------------------------------------------------------------------
    # Bulk import
    # ------------------------------------------------------------------

    def import_rows(
        self,
        rows: Iterable[Sequence[Any]],
        first_row_number: int = 1,
    ) -> ImportResult:
        """
        Upsert vouchers from tabular rows, one row at a time.

        Rows that fail validation are collected as errors. Unknown providers
        are created as "Provider <id>". A single IMPORT entry records the
        number of applied rows when at least one row applied.
        """
        result = ImportResult()

        for row_number, row in enumerate(rows, start=first_row_number):
            if not row or is_empty_row(row):
                continue

            try:
                voucher = parse_import_row(row, self._pricing)
            except ValidationError as e:
                result.errors.append(ImportRowError(row_number=row_number, message=e.message))
                continue

            if self._ledger.find_provider(voucher.provider_id) is None:
                provider = Provider(
                    id=voucher.provider_id, name=f"Provider {voucher.provider_id}"
                )
                self._ledger.add_provider(provider)
                result.created_providers.append(provider)
                logger.info("import_provider_created", provider_id=provider.id)

            self._ledger.upsert_voucher(voucher)
            result.applied.append(voucher)

        if result.errors:
            logger.warning(
                "import_rows_skipped",
                errors=[f"row {e.row_number}: {e.message}" for e in result.errors],
            )

        if result.succeeded:
            result.entry = self._log.append(
                ActivityKind.IMPORT,
                f"Imported/updated {result.applied_count} voucher(s).",
            )

        logger.info(
            "import_complete",
            applied=result.applied_count,
            errors=len(result.errors),
            created_providers=len(result.created_providers),
        )
        return result
