"""
Generate Report Use Case.

Renders the full or short report of the current ledger as chat text, an
HTML receipt or a thermal-printer PDF. Reports are read-only and never
touch the activity log.
"""

from dataclasses import dataclass
from datetime import datetime

from voucher_ledger.application.dto.requests import GenerateReportRequest
from voucher_ledger.application.session import LedgerSession
from voucher_ledger.application.use_cases.base import LedgerUseCase
from voucher_ledger.config import get_logger
from voucher_ledger.config.settings import ReportSettings, get_settings
from voucher_ledger.infrastructure.pdf import IReceiptPdfRenderer, ThermalReceiptPdfRenderer
from voucher_ledger.infrastructure.reports import (
    ReportFormat,
    ReportKind,
    render_full,
    render_full_receipt,
    render_short,
    render_short_receipt,
)

logger = get_logger(__name__)

MEDIA_TYPES = {
    ReportFormat.TEXT: "text/plain; charset=utf-8",
    ReportFormat.HTML: "text/html; charset=utf-8",
    ReportFormat.PDF: "application/pdf",
}
EXTENSIONS = {ReportFormat.TEXT: "txt", ReportFormat.HTML: "html", ReportFormat.PDF: "pdf"}


@dataclass
class GeneratedReport:
    """A rendered report ready to copy, print or save."""

    kind: ReportKind
    format: ReportFormat
    content: str | bytes
    media_type: str
    filename: str


class GenerateReportUseCase(LedgerUseCase):
    """Render a report projection of the ledger."""

    def __init__(
        self,
        session: LedgerSession | None = None,
        report_settings: ReportSettings | None = None,
        pdf_renderer: IReceiptPdfRenderer | None = None,
        clock=datetime.now,
    ):
        super().__init__(session)
        self._report_settings = report_settings
        self._pdf_renderer = pdf_renderer
        self._clock = clock

    def _get_report_settings(self) -> ReportSettings:
        if self._report_settings is None:
            self._report_settings = get_settings().report
        return self._report_settings

    async def execute(self, request: GenerateReportRequest) -> GeneratedReport:
        session = await self._get_session()
        providers = session.ledger.providers
        vouchers = session.ledger.vouchers
        settings = self._get_report_settings()
        printed_at = self._clock()

        content: str | bytes
        if request.format is ReportFormat.TEXT:
            render = render_full if request.kind is ReportKind.FULL else render_short
            content = render(providers, vouchers, settings)
        elif request.format is ReportFormat.HTML:
            render = render_full_receipt if request.kind is ReportKind.FULL else render_short_receipt
            content = render(providers, vouchers, settings, printed_at)
        else:
            renderer = self._pdf_renderer or ThermalReceiptPdfRenderer(settings, printed_at)
            content = renderer.render(request.kind, providers, vouchers)

        filename = f"{request.kind.value}-report-{printed_at:%Y%m%d-%H%M}.{EXTENSIONS[request.format]}"

        logger.info(
            "report_generated",
            kind=request.kind.value,
            format=request.format.value,
            size=len(content),
        )
        return GeneratedReport(
            kind=request.kind,
            format=request.format,
            content=content,
            media_type=MEDIA_TYPES[request.format],
            filename=filename,
        )
