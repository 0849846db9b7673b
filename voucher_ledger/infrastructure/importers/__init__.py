"""Bulk import row sources."""

from voucher_ledger.infrastructure.importers.csv_rows import FIRST_DATA_ROW, read_csv_rows

__all__ = ["FIRST_DATA_ROW", "read_csv_rows"]
