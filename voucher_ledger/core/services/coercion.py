"""Coercion of loosely typed input (form fields, spreadsheet cells) to integers."""

import re
from typing import Any

from voucher_ledger.core.exceptions import ValidationError
from voucher_ledger.core.services.formatting import parse_formatted_number

# "10.000", "1.250.000", optionally prefixed with "Rp"
_GROUPED_RE = re.compile(r"^(?:Rp\.?\s*)?\d{1,3}(?:\.\d{3})+$", re.IGNORECASE)
_CURRENCY_PREFIX_RE = re.compile(r"^Rp\.?\s*", re.IGNORECASE)


def is_blank(value: Any) -> bool:
    """None and whitespace-only strings count as absent."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def coerce_int(field: str, value: Any) -> int:
    """
    Convert value to an int or raise ValidationError.

    Accepts ints, integral floats (spreadsheets hand out 5.0 for 5), plain
    digit strings and id-ID grouped strings such as "10.000" or "Rp 10.000".
    Booleans and fractional values are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(field, "must be a whole number", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValidationError(field, "must be a whole number", value)
    if isinstance(value, str):
        text = value.strip()
        if _GROUPED_RE.match(text):
            return parse_formatted_number(text)
        text = _CURRENCY_PREFIX_RE.sub("", text)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise ValidationError(field, "must be a number", value) from None
        if number.is_integer():
            return int(number)
        raise ValidationError(field, "must be a whole number", value)
    raise ValidationError(field, "must be a number", value)


def coerce_non_negative(field: str, value: Any, default: int = 0) -> int:
    """Like coerce_int, with blank input mapped to default and negatives rejected."""
    if is_blank(value):
        return default
    number = coerce_int(field, value)
    if number < 0:
        raise ValidationError(field, "must not be negative", value)
    return number


def coerce_positive(field: str, value: Any) -> int:
    """A strictly positive whole number, e.g. a restock or sale quantity."""
    if is_blank(value):
        raise ValidationError(field, "is required", value)
    number = coerce_int(field, value)
    if number <= 0:
        raise ValidationError(field, "must be greater than zero", value)
    return number
