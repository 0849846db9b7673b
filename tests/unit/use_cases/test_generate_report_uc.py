"""Unit tests for GenerateReportUseCase."""

from datetime import datetime
from unittest.mock import MagicMock

from voucher_ledger.application.dto.requests import GenerateReportRequest
from voucher_ledger.application.use_cases.generate_report import GenerateReportUseCase
from voucher_ledger.infrastructure.reports import ReportFormat, ReportKind

PRINTED_AT = datetime(2024, 5, 1, 14, 30)


def make_use_case(session, report_settings, **kwargs) -> GenerateReportUseCase:
    return GenerateReportUseCase(
        session=session,
        report_settings=report_settings,
        clock=lambda: PRINTED_AT,
        **kwargs,
    )


class TestGenerateReportUseCase:
    """Tests for report rendering through the use case."""

    async def test_text_full(self, session, mock_store, report_settings):
        report = await make_use_case(session, report_settings).execute(GenerateReportRequest())

        assert report.media_type.startswith("text/plain")
        assert report.filename == "full-report-20240501-1430.txt"
        assert "===== TELKOMSEL =====" in report.content
        mock_store.save.assert_not_awaited()

    async def test_html_short(self, session, report_settings):
        report = await make_use_case(session, report_settings).execute(
            GenerateReportRequest(kind=ReportKind.SHORT, format=ReportFormat.HTML)
        )

        assert report.media_type.startswith("text/html")
        assert report.filename.endswith(".html")
        assert "Planned   : 6 pcs (Rp 282.000)" in report.content

    async def test_pdf_default_renderer(self, session, report_settings):
        report = await make_use_case(session, report_settings).execute(
            GenerateReportRequest(format=ReportFormat.PDF)
        )

        assert report.media_type == "application/pdf"
        assert report.content.startswith(b"%PDF")

    async def test_pdf_injected_renderer(self, session, report_settings):
        renderer = MagicMock()
        renderer.render = MagicMock(return_value=b"%PDF-fake")

        report = await make_use_case(session, report_settings, pdf_renderer=renderer).execute(
            GenerateReportRequest(kind=ReportKind.SHORT, format="pdf")
        )

        assert report.content == b"%PDF-fake"
        kind, providers, vouchers = renderer.render.call_args.args
        assert kind is ReportKind.SHORT
        assert len(vouchers) == 2

    async def test_does_not_log_activity(self, session, report_settings):
        await make_use_case(session, report_settings).execute(GenerateReportRequest())
        assert len(session.activity_log) == 0
