"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "vouchers.db"

    # SQLite settings
    pool_size: int = 1  # single logical writer
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class PricingSettings(BaseSettings):
    """Automatic sell price derivation."""

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    markup: int = 3000
    rounding_step: int = 1000
    round_up_threshold: int = 500  # remainders above this round up


class ReportSettings(BaseSettings):
    """Report and receipt presentation."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    store_name: str = "VOUCHER INVENTORY"
    reporter_name: str | None = None
    receipt_width_mm: int = 58


class LedgerSettings(BaseSettings):
    """Ledger bootstrap behaviour."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    seed_default_providers: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Voucher Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
