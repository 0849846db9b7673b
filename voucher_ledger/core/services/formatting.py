"""Rupiah formatting and parsing of id-ID grouped numbers."""

import re

_NON_DIGIT_RE = re.compile(r"\D")


def format_number(value: int) -> str:
    """Group thousands with dots: 1250000 -> '1.250.000'."""
    return f"{value:,}".replace(",", ".")


def format_rupiah(amount: int) -> str:
    """Format whole Rupiah: 10000 -> 'Rp 10.000', -5000 -> '-Rp 5.000'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {format_number(abs(amount))}"


def parse_formatted_number(value: str | None) -> int:
    """
    Parse a number typed with id-ID grouping ('10.000', 'Rp 10.000').

    Every non-digit character is dropped, so the result is never negative.
    Empty input parses to 0.
    """
    if not value:
        return 0
    digits = _NON_DIGIT_RE.sub("", str(value))
    return int(digits) if digits else 0
