"""Report variants."""

from enum import Enum


class ReportKind(str, Enum):
    """Which report to produce."""

    FULL = "full"  # stock, sales and profit
    SHORT = "short"  # remaining and planned stock


class ReportFormat(str, Enum):
    """Output format of a report."""

    TEXT = "text"
    HTML = "html"
    PDF = "pdf"
