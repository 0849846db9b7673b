"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from voucher_ledger.application.services import reset_services
from voucher_ledger.config import reset_settings
from voucher_ledger.config.settings import ReportSettings
from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.services.activity_log import ActivityLog
from voucher_ledger.core.services.ledger import InventoryLedger
from voucher_ledger.core.services.stock_operations import StockOperations


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep settings and singletons from leaking between tests."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


class FixedClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 5, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current.replace(second=(self.current.second + 1) % 60)
        return value


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def report_settings() -> ReportSettings:
    """Explicit report settings, independent of the environment."""
    return ReportSettings(store_name="KIOS PULSA", reporter_name=None, receipt_width_mm=58)


@pytest.fixture
def providers() -> list[Provider]:
    return [
        Provider(id=1, name="Telkomsel"),
        Provider(id=2, name="IM3"),
        Provider(id=3, name="Three"),
    ]


@pytest.fixture
def vouchers() -> list[Voucher]:
    return [
        Voucher(
            provider_id=1,
            name="A",
            total_stock=10,
            remaining_stock=10,
            cost_price=7000,
            sell_price=10000,
        ),
        Voucher(
            provider_id=1,
            name="B",
            total_stock=5,
            remaining_stock=2,
            cost_price=20000,
            sell_price=23000,
            planned_stock=4,
        ),
        Voucher(
            provider_id=2,
            name="10GB / 30 Days",
            total_stock=3,
            remaining_stock=3,
            cost_price=50000,
            sell_price=53000,
        ),
    ]


@pytest.fixture
def ledger(providers: list[Provider], vouchers: list[Voucher]) -> InventoryLedger:
    return InventoryLedger(providers, vouchers)


@pytest.fixture
def activity_log(clock: FixedClock) -> ActivityLog:
    return ActivityLog(clock=clock)


@pytest.fixture
def operations(ledger: InventoryLedger, activity_log: ActivityLog) -> StockOperations:
    return StockOperations(ledger, activity_log)
