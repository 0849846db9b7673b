"""
Plain-text inventory reports, meant to be copied into a chat message.

Both reports are pure functions of a ledger snapshot. Providers without
vouchers are omitted and vouchers without a provider are ignored.
"""

from collections.abc import Sequence

from voucher_ledger.config.settings import ReportSettings, get_settings
from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.services.formatting import format_rupiah
from voucher_ledger.core.services.inventory_summary import summarize


def _settings_or_default(settings: ReportSettings | None) -> ReportSettings:
    return settings if settings is not None else get_settings().report


def render_full(
    providers: Sequence[Provider],
    vouchers: Sequence[Voucher],
    settings: ReportSettings | None = None,
) -> str:
    """Stock, sales and profit per voucher with provider and grand totals."""
    settings = _settings_or_default(settings)
    summary = summarize(providers, vouchers)
    lines = [f"FULL VOUCHER REPORT - {settings.store_name}", ""]

    for group in summary.active_providers:
        name = group.provider.name
        lines += [f"===== {name.upper()} =====", ""]
        for v in group.vouchers:
            lines += [
                f"- {v.name}",
                "=================",
                f"Cost price  : {format_rupiah(v.cost_price)}",
                f"Sell price  : {format_rupiah(v.sell_price)}",
                "--- Stock ---",
                f"Total stock : {v.total_stock} pcs",
                f"Sold        : {v.sold} pcs",
                f"Remaining   : {v.remaining_stock} pcs",
                "--- Finance ---",
                f"Total sales        : {format_rupiah(v.sales_total)}",
                f"Cost of units sold : {format_rupiah(v.cost_of_sold)}",
                f"Profit             : {format_rupiah(v.profit)}",
                "",
            ]
        lines += [
            f"--- Subtotal {name} ---",
            f"Total sales : {format_rupiah(group.sales_total)}",
            f"Total profit: {format_rupiah(group.profit)}",
            "------------------------",
            "",
        ]

    lines += [
        "===== GRAND TOTAL =====",
        f"All sales : {format_rupiah(summary.sales_total)}",
        f"All profit: {format_rupiah(summary.profit)}",
    ]
    if settings.reporter_name:
        lines += ["", f"Reported by: {settings.reporter_name}"]
    return "\n".join(lines)


def render_short(
    providers: Sequence[Provider],
    vouchers: Sequence[Voucher],
    settings: ReportSettings | None = None,
) -> str:
    """Remaining stock and planned restock cost per voucher."""
    settings = _settings_or_default(settings)
    summary = summarize(providers, vouchers)
    lines = [f"REMAINING & PLANNED STOCK REPORT - {settings.store_name}", ""]

    for group in summary.active_providers:
        name = group.provider.name
        lines += [f"===== {name.upper()} =====", ""]
        for v in group.vouchers:
            lines += [f"- {v.name}", f"Remaining : {v.remaining_stock} pcs"]
            if v.planned_stock > 0:
                lines.append(
                    f"*Planned restock: {v.planned_stock} pcs x "
                    f"{format_rupiah(v.cost_price)} = {format_rupiah(v.planned_cost)}*"
                )
            lines.append("")
        lines += [
            f"--- *Subtotal cost {name}* ---",
            f"Planned restock total : {format_rupiah(group.planned_cost)}",
            "---------------------------",
            "",
        ]

    lines += [
        "*GRAND TOTAL COST*",
        f"Planned restock total : {format_rupiah(summary.planned_cost)}",
    ]
    if settings.reporter_name:
        lines += ["", f"Reported by: {settings.reporter_name}"]
    return "\n".join(lines)
