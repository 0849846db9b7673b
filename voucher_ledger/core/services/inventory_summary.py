"""Dashboard figures computed from a ledger snapshot."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from voucher_ledger.core.entities.inventory import Provider, Voucher


@dataclass
class ProviderSummary:
    """Stock and money figures for one provider."""

    provider: Provider
    vouchers: list[Voucher] = field(default_factory=list)

    @property
    def stock_value(self) -> int:
        return sum(v.stock_value for v in self.vouchers)

    @property
    def sales_total(self) -> int:
        return sum(v.sales_total for v in self.vouchers)

    @property
    def cost_of_sold(self) -> int:
        return sum(v.cost_of_sold for v in self.vouchers)

    @property
    def profit(self) -> int:
        return self.sales_total - self.cost_of_sold

    @property
    def remaining_units(self) -> int:
        return sum(v.remaining_stock for v in self.vouchers)

    @property
    def sold_units(self) -> int:
        return sum(v.sold for v in self.vouchers)

    @property
    def planned_cost(self) -> int:
        return sum(v.planned_cost for v in self.vouchers)


@dataclass
class InventorySummary:
    """Per-provider summaries plus ledger-wide totals."""

    providers: list[ProviderSummary] = field(default_factory=list)

    @property
    def stock_value(self) -> int:
        return sum(p.stock_value for p in self.providers)

    @property
    def sales_total(self) -> int:
        return sum(p.sales_total for p in self.providers)

    @property
    def profit(self) -> int:
        return sum(p.profit for p in self.providers)

    @property
    def planned_cost(self) -> int:
        return sum(p.planned_cost for p in self.providers)

    @property
    def active_providers(self) -> list[ProviderSummary]:
        """Providers that own at least one voucher."""
        return [p for p in self.providers if p.vouchers]


def summarize(providers: Sequence[Provider], vouchers: Sequence[Voucher]) -> InventorySummary:
    """
    Group vouchers under their providers.

    Vouchers whose provider is missing are left out; providers keep the
    order they are given in.
    """
    by_provider: dict[int, ProviderSummary] = {
        p.id: ProviderSummary(provider=p) for p in providers
    }
    for voucher in vouchers:
        summary = by_provider.get(voucher.provider_id)
        if summary is not None:
            summary.vouchers.append(voucher)
    return InventorySummary(providers=list(by_provider.values()))
