"""Tests for settings and logging configuration."""

from pathlib import Path

import structlog

from voucher_ledger.config import configure_logging, get_logger, get_settings, reset_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, tmp_path: Path):
        settings = get_settings()

        assert settings.app_name == "Voucher Ledger"
        assert settings.storage.db_path == tmp_path / "data" / "vouchers.db"
        assert settings.storage.pool_size == 1
        assert settings.pricing.markup == 3000
        assert settings.pricing.rounding_step == 1000
        assert settings.pricing.round_up_threshold == 500
        assert settings.report.store_name == "VOUCHER INVENTORY"
        assert settings.report.receipt_width_mm == 58
        assert settings.ledger.seed_default_providers is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("REPORT_STORE_NAME", "KIOS PULSA")
        monkeypatch.setenv("REPORT_REPORTER_NAME", "Budi")
        monkeypatch.setenv("LEDGER_SEED_DEFAULT_PROVIDERS", "false")
        monkeypatch.setenv("PRICING_ROUNDING_STEP", "500")
        reset_settings()

        settings = get_settings()

        assert settings.report.store_name == "KIOS PULSA"
        assert settings.report.reporter_name == "Budi"
        assert settings.ledger.seed_default_providers is False
        assert settings.pricing.rounding_step == 500

    def test_singleton(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_configure_logging(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        reset_settings()

        configure_logging(force=True)
        configure_logging()

        assert structlog.is_configured()
        get_logger(__name__).info("logging_configured", check=True)
