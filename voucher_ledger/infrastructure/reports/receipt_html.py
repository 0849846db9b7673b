"""HTML receipts sized for a thermal printer, printed from a browser window."""

from collections.abc import Sequence
from datetime import datetime
from html import escape

from voucher_ledger.config.settings import ReportSettings, get_settings
from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.services.formatting import format_rupiah
from voucher_ledger.core.services.inventory_summary import summarize


def _receipt_css(width_mm: int) -> str:
    return f"""
  @media print {{
    @page {{ margin: 0; size: {width_mm}mm auto; }}
  }}
  body {{
    font-family: 'Courier New', Courier, monospace;
    font-size: 10px;
    color: #000;
    background-color: #fff;
    width: {width_mm}mm;
    margin: 0;
    padding: 5px;
    box-sizing: border-box;
  }}
  .center {{ text-align: center; }}
  .bold {{ font-weight: bold; }}
  .line {{ border-top: 1px dashed #000; margin: 5px 0; }}
  .provider-name {{ text-transform: uppercase; font-weight: bold; margin: 8px 0 3px; }}
  .voucher {{ margin-bottom: 5px; padding-left: 4px; }}
  .totals {{ margin-top: 8px; }}
  .footer {{ margin-top: 10px; }}
  table {{ width: 100%; font-size: 9px; }}
  td {{ vertical-align: top; }}
  td:last-child {{ text-align: right; }}
"""


def _document(
    title: str,
    body: str,
    settings: ReportSettings,
    printed_at: datetime,
) -> str:
    footer = ""
    if settings.reporter_name:
        footer = f'<div class="footer center">Reported by: {escape(settings.reporter_name)}</div>'
    return (
        "<!DOCTYPE html>\n"
        '<html lang="id">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_receipt_css(settings.receipt_width_mm)}</style>\n"
        "</head>\n"
        "<body>\n"
        '<div class="header center">\n'
        f'<div class="bold">{escape(settings.store_name)}</div>\n'
        f"<div>{printed_at.strftime('%d/%m/%Y %H:%M')}</div>\n"
        "</div>\n"
        '<div class="line"></div>\n'
        f'<div class="center bold">{escape(title)}</div>\n'
        f"{body}"
        '<div class="line"></div>\n'
        f"{footer}\n"
        "</body>\n"
        "</html>\n"
    )


def render_full_receipt(
    providers: Sequence[Provider],
    vouchers: Sequence[Voucher],
    settings: ReportSettings | None = None,
    printed_at: datetime | None = None,
) -> str:
    """Receipt version of the full report."""
    settings = settings if settings is not None else get_settings().report
    summary = summarize(providers, vouchers)
    parts: list[str] = []

    for group in summary.active_providers:
        parts.append(f'<div class="provider-name">{escape(group.provider.name)}</div>\n')
        for v in group.vouchers:
            parts.append(
                '<div class="voucher">\n'
                f"<div><b>{escape(v.name)}</b></div>\n"
                "<table>\n"
                f"<tr><td>Remaining/Total</td><td>{v.remaining_stock}/{v.total_stock}</td></tr>\n"
                f"<tr><td>Sold</td><td>{v.sold} pcs</td></tr>\n"
                f"<tr><td>Sales</td><td>{format_rupiah(v.sales_total)}</td></tr>\n"
                f"<tr><td>Profit</td><td>{format_rupiah(v.profit)}</td></tr>\n"
                "</table>\n"
                "</div>\n"
            )
        parts.append(f"<div>Subtotal sales: {format_rupiah(group.sales_total)}</div>\n")
        parts.append(f"<div>Subtotal profit: {format_rupiah(group.profit)}</div>\n")

    parts.append(
        '<div class="totals">\n'
        f"<div><b>Total sales : {format_rupiah(summary.sales_total)}</b></div>\n"
        f"<div><b>Total profit: {format_rupiah(summary.profit)}</b></div>\n"
        "</div>\n"
    )
    return _document("FULL REPORT", "".join(parts), settings, printed_at or datetime.now())


def render_short_receipt(
    providers: Sequence[Provider],
    vouchers: Sequence[Voucher],
    settings: ReportSettings | None = None,
    printed_at: datetime | None = None,
) -> str:
    """Receipt version of the remaining and planned stock report."""
    settings = settings if settings is not None else get_settings().report
    summary = summarize(providers, vouchers)
    parts: list[str] = []

    for group in summary.active_providers:
        parts.append(f'<div class="provider-name">{escape(group.provider.name)}</div>\n')
        for v in group.vouchers:
            parts.append(
                '<div class="voucher">\n'
                f"<div><b>- {escape(v.name)}</b></div>\n"
                f"<div>Remaining : {v.remaining_stock} pcs</div>\n"
            )
            if v.planned_stock > 0:
                parts.append(
                    f"<div>Planned   : {v.planned_stock} pcs "
                    f"({format_rupiah(v.planned_cost)})</div>\n"
                )
            parts.append("</div>\n")
        parts.append(f"<div>Subtotal cost: {format_rupiah(group.planned_cost)}</div>\n")

    parts.append(
        '<div class="totals">\n'
        f"<div><b>Total restock cost: {format_rupiah(summary.planned_cost)}</b></div>\n"
        "</div>\n"
    )
    return _document("SHORT REPORT", "".join(parts), settings, printed_at or datetime.now())
