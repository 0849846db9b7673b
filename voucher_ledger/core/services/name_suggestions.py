"""Voucher name suggestions for the voucher form."""

from functools import lru_cache

SUGGESTION_DAYS = (1, 2, 3, 5, 7, 10, 14, 30)


def _format_gb(half_gb: int) -> str:
    value = half_gb / 2
    return f"{int(value)}GB" if value.is_integer() else f"{value}GB"


@lru_cache(maxsize=1)
def voucher_name_catalog() -> tuple[str, ...]:
    """Every '<size>GB / <days> Days' combination from 1GB to 15GB in 0.5GB steps."""
    return tuple(
        f"{_format_gb(half_gb)} / {days} Days"
        for half_gb in range(2, 31)
        for days in SUGGESTION_DAYS
    )


def suggest(text: str, limit: int = 5) -> list[str]:
    """Catalog names containing text (case-insensitive), at most limit of them."""
    needle = text.strip().lower()
    if not needle:
        return []
    return [name for name in voucher_name_catalog() if needle in name.lower()][:limit]
