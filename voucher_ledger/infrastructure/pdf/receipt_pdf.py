"""
Thermal receipt PDF renderer using fpdf2.

Lays the full or short report out on a single roll-width page whose height
grows with the content, so it prints without page breaks.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from voucher_ledger.config.settings import ReportSettings, get_settings
from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.services.formatting import format_rupiah
from voucher_ledger.core.services.inventory_summary import InventorySummary, summarize
from voucher_ledger.infrastructure.reports.kinds import ReportKind

LINE_HEIGHT = 4.0  # mm
MARGIN = 3.0  # mm
FONT_SIZE = 7


@dataclass
class _Line:
    text: str
    bold: bool = False
    align: str = "L"
    rule: bool = False  # dashed separator instead of text


def _safe_text(text: str) -> str:
    """Core PDF fonts are latin-1 only."""
    return text.encode("latin-1", "replace").decode("latin-1")


class IReceiptPdfRenderer(ABC):
    """Interface for receipt PDF rendering implementations."""

    @abstractmethod
    def render(
        self,
        kind: ReportKind,
        providers: Sequence[Provider],
        vouchers: Sequence[Voucher],
    ) -> bytes:
        """Render a report as receipt PDF bytes."""
        ...


class ThermalReceiptPdfRenderer(IReceiptPdfRenderer):
    """Renders receipts for a narrow thermal printer roll."""

    def __init__(
        self,
        report_settings: ReportSettings | None = None,
        printed_at: datetime | None = None,
    ) -> None:
        if report_settings is None:
            report_settings = get_settings().report
        self._settings = report_settings
        self._printed_at = printed_at

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(
        self,
        kind: ReportKind,
        providers: Sequence[Provider],
        vouchers: Sequence[Voucher],
    ) -> bytes:
        summary = summarize(providers, vouchers)
        if kind is ReportKind.FULL:
            body = self._full_lines(summary)
            title = "FULL REPORT"
        else:
            body = self._short_lines(summary)
            title = "SHORT REPORT"

        lines = self._header_lines(title) + body + self._footer_lines()
        return self._layout(lines)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _header_lines(self, title: str) -> list[_Line]:
        printed_at = self._printed_at or datetime.now()
        return [
            _Line(self._settings.store_name, bold=True, align="C"),
            _Line(printed_at.strftime("%d/%m/%Y %H:%M"), align="C"),
            _Line("", rule=True),
            _Line(title, bold=True, align="C"),
        ]

    def _footer_lines(self) -> list[_Line]:
        lines = [_Line("", rule=True)]
        if self._settings.reporter_name:
            lines.append(_Line(f"Reported by: {self._settings.reporter_name}", align="C"))
        return lines

    @staticmethod
    def _full_lines(summary: InventorySummary) -> list[_Line]:
        lines: list[_Line] = []
        for group in summary.active_providers:
            lines.append(_Line(group.provider.name.upper(), bold=True))
            for v in group.vouchers:
                lines += [
                    _Line(v.name, bold=True),
                    _Line(f" Remaining/Total {v.remaining_stock}/{v.total_stock}"),
                    _Line(f" Sold {v.sold} pcs"),
                    _Line(f" Sales {format_rupiah(v.sales_total)}"),
                    _Line(f" Profit {format_rupiah(v.profit)}"),
                ]
            lines += [
                _Line(f"Subtotal sales: {format_rupiah(group.sales_total)}"),
                _Line(f"Subtotal profit: {format_rupiah(group.profit)}"),
            ]
        lines += [
            _Line("", rule=True),
            _Line(f"Total sales : {format_rupiah(summary.sales_total)}", bold=True),
            _Line(f"Total profit: {format_rupiah(summary.profit)}", bold=True),
        ]
        return lines

    @staticmethod
    def _short_lines(summary: InventorySummary) -> list[_Line]:
        lines: list[_Line] = []
        for group in summary.active_providers:
            lines.append(_Line(group.provider.name.upper(), bold=True))
            for v in group.vouchers:
                lines += [_Line(f"- {v.name}", bold=True), _Line(f" Remaining {v.remaining_stock} pcs")]
                if v.planned_stock > 0:
                    lines.append(
                        _Line(f" Planned {v.planned_stock} pcs ({format_rupiah(v.planned_cost)})")
                    )
            lines.append(_Line(f"Subtotal cost: {format_rupiah(group.planned_cost)}"))
        lines += [
            _Line("", rule=True),
            _Line(f"Total restock cost: {format_rupiah(summary.planned_cost)}", bold=True),
        ]
        return lines

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _layout(self, lines: list[_Line]) -> bytes:
        width = float(self._settings.receipt_width_mm)
        height = max(width, 2 * MARGIN + LINE_HEIGHT * len(lines))

        pdf = FPDF(orientation="P", unit="mm", format=(width, height))
        pdf.set_margins(MARGIN, MARGIN, MARGIN)
        pdf.set_auto_page_break(auto=False)
        pdf.add_page()

        content_width = width - 2 * MARGIN
        for line in lines:
            if line.rule:
                y = pdf.get_y() + LINE_HEIGHT / 2
                pdf.dashed_line(MARGIN, y, width - MARGIN, y, dash_length=1, space_length=1)
                pdf.set_y(pdf.get_y() + LINE_HEIGHT)
                continue
            pdf.set_font("Courier", "B" if line.bold else "", FONT_SIZE)
            pdf.cell(
                content_width,
                LINE_HEIGHT,
                _safe_text(line.text),
                align=line.align,
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )

        return bytes(pdf.output())
