"""
Conversion of bulk import rows to vouchers.

A row is an ordered tuple
``(provider_id, name, total_stock, remaining_stock, cost_price, sell_price,
planned_stock)``; any trailing fields may be missing or None.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from voucher_ledger.core.entities.inventory import Voucher, normalize_voucher_name
from voucher_ledger.core.exceptions import ValidationError
from voucher_ledger.core.services.coercion import (
    coerce_int,
    coerce_non_negative,
    is_blank,
)
from voucher_ledger.core.services.pricing import PricingRule

ROW_FIELDS = (
    "provider_id",
    "name",
    "total_stock",
    "remaining_stock",
    "cost_price",
    "sell_price",
    "planned_stock",
)


def is_empty_row(row: Sequence[Any]) -> bool:
    return all(is_blank(cell) for cell in row)


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _cell_text(value: Any) -> str:
    # Spreadsheets hand out numeric names such as 10 as 10.0
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return normalize_voucher_name(str(value))


def parse_import_row(row: Sequence[Any], pricing: PricingRule) -> Voucher:
    """
    Build the voucher a row describes or raise ValidationError.

    Rules:
        - provider id and name are required, the id must be a whole number
        - stock and price cells must be non-negative whole numbers
        - remaining stock defaults to total stock only when the cell is absent
        - sell price is taken when present and numeric, otherwise derived
          from the cost price
    """
    raw_provider_id = _cell(row, 0)
    raw_name = _cell(row, 1)
    if is_blank(raw_provider_id) or is_blank(raw_name):
        raise ValidationError("provider_id", "provider id and voucher name are required")

    provider_id = coerce_int("provider_id", raw_provider_id)
    name = _cell_text(raw_name)
    if not name:
        raise ValidationError("name", "voucher name is required", raw_name)

    total_stock = coerce_non_negative("total_stock", _cell(row, 2))
    remaining_stock = coerce_non_negative(
        "remaining_stock", _cell(row, 3), default=total_stock
    )
    cost_price = coerce_non_negative("cost_price", _cell(row, 4))
    planned_stock = coerce_non_negative("planned_stock", _cell(row, 6))

    raw_sell_price = _cell(row, 5)
    sell_price: int | None = None
    if not is_blank(raw_sell_price):
        try:
            sell_price = coerce_int("sell_price", raw_sell_price)
        except ValidationError:
            sell_price = None
        if sell_price is not None and sell_price < 0:
            raise ValidationError("sell_price", "must not be negative", raw_sell_price)
    if sell_price is None:
        sell_price = pricing.derive(cost_price)

    if remaining_stock > total_stock:
        raise ValidationError(
            "remaining_stock",
            f"remaining stock {remaining_stock} exceeds total stock {total_stock}",
            remaining_stock,
        )

    try:
        return Voucher(
            provider_id=provider_id,
            name=name,
            total_stock=total_stock,
            remaining_stock=remaining_stock,
            cost_price=cost_price,
            sell_price=sell_price,
            planned_stock=planned_stock,
        )
    except PydanticValidationError as e:
        raise ValidationError("row", str(e.errors()[0]["msg"])) from e
