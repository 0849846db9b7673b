"""Tests for import row parsing."""

import pytest

from voucher_ledger.core.exceptions import ValidationError
from voucher_ledger.core.services.pricing import PricingRule
from voucher_ledger.core.services.voucher_import import is_empty_row, parse_import_row

PRICING = PricingRule()


class TestParseImportRow:
    """Tests for parse_import_row."""

    def test_full_row(self):
        voucher = parse_import_row((1, "5GB / 7 Days", 10, 6, 7000, 12000, 3), PRICING)

        assert voucher.provider_id == 1
        assert voucher.name == "5GB / 7 Days"
        assert voucher.total_stock == 10
        assert voucher.remaining_stock == 6
        assert voucher.cost_price == 7000
        assert voucher.sell_price == 12000
        assert voucher.planned_stock == 3

    def test_missing_trailing_fields(self):
        voucher = parse_import_row((2, "A"), PRICING)
        assert voucher.total_stock == 0
        assert voucher.remaining_stock == 0
        assert voucher.sell_price == 0

    def test_remaining_defaults_to_total_when_absent(self):
        assert parse_import_row((1, "A", 8), PRICING).remaining_stock == 8

    def test_explicit_zero_remaining_kept(self):
        assert parse_import_row((1, "A", 8, 0), PRICING).remaining_stock == 0

    def test_sell_price_derived_when_blank(self):
        assert parse_import_row((1, "A", 1, 1, 7600, ""), PRICING).sell_price == 11000

    def test_non_numeric_sell_price_derived(self):
        assert parse_import_row((1, "A", 1, 1, 7000, "n/a"), PRICING).sell_price == 10000

    def test_grouped_numbers(self):
        voucher = parse_import_row(("1", "A", "1.000", "900", "10.000", "Rp 13.000"), PRICING)
        assert voucher.total_stock == 1000
        assert voucher.cost_price == 10000
        assert voucher.sell_price == 13000

    def test_spreadsheet_floats(self):
        voucher = parse_import_row((1.0, 10.0, 5.0, 5.0, 7000.0), PRICING)
        assert voucher.provider_id == 1
        assert voucher.name == "10"
        assert voucher.total_stock == 5

    @pytest.mark.parametrize(
        "row",
        [
            (None, "A"),
            (1, ""),
            (1, "   "),
            ("one", "A"),
            (1.5, "A"),
            (1, "A", -1),
            (1, "A", "ten"),
            (1, "A", 5, 6),
            (1, "A", 5, 5, 1000, -1),
            (1, "A", 5, 5, 1000, None, -2),
        ],
    )
    def test_invalid_rows(self, row):
        with pytest.raises(ValidationError):
            parse_import_row(row, PRICING)

    def test_remaining_error_message(self):
        with pytest.raises(ValidationError, match="exceeds total stock"):
            parse_import_row((1, "A", 5, 6), PRICING)


class TestIsEmptyRow:
    def test_empty(self):
        assert is_empty_row((None, "", "  "))

    def test_not_empty(self):
        assert not is_empty_row((None, "A"))
