"""Tests for dashboard summary figures."""

from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.services.inventory_summary import summarize


class TestSummarize:
    """Tests for summarize()."""

    def test_provider_figures(self, providers: list[Provider], vouchers: list[Voucher]):
        summary = summarize(providers, vouchers)
        telkomsel = summary.providers[0]

        assert telkomsel.provider.name == "Telkomsel"
        assert [v.name for v in telkomsel.vouchers] == ["A", "B"]
        # A: nothing sold; B: 3 sold at 23000, cost 20000
        assert telkomsel.sales_total == 69000
        assert telkomsel.cost_of_sold == 60000
        assert telkomsel.profit == 9000
        assert telkomsel.remaining_units == 12
        assert telkomsel.sold_units == 3
        assert telkomsel.stock_value == 10 * 7000 + 5 * 20000
        assert telkomsel.planned_cost == 80000

    def test_grand_totals(self, providers: list[Provider], vouchers: list[Voucher]):
        summary = summarize(providers, vouchers)

        assert summary.sales_total == 69000
        assert summary.profit == 9000
        assert summary.planned_cost == 80000
        assert summary.stock_value == 70000 + 100000 + 150000

    def test_active_providers_skip_empty(self, providers: list[Provider], vouchers: list[Voucher]):
        summary = summarize(providers, vouchers)
        assert [p.provider.name for p in summary.active_providers] == ["Telkomsel", "IM3"]

    def test_orphans_excluded(self, providers: list[Provider]):
        summary = summarize(
            providers,
            [Voucher(provider_id=99, name="ghost", total_stock=5, sell_price=1000)],
        )
        assert summary.active_providers == []
        assert summary.sales_total == 0
