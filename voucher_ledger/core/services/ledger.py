"""
In-memory inventory ledger.

The ledger is the single owner of Provider and Voucher records. Records are
frozen models, so handing them out never exposes a mutable alias; every
change goes through one of the methods below. Lookups on missing keys are
no-ops reported through return values, never exceptions.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from voucher_ledger.core.entities.inventory import Provider, Voucher, VoucherKey

SORTABLE_FIELDS = frozenset(
    {
        "name",
        "total_stock",
        "remaining_stock",
        "cost_price",
        "sell_price",
        "planned_stock",
    }
)


@dataclass
class ProviderRemoval:
    """What a provider deletion removed."""

    provider: Provider
    vouchers: list[Voucher] = field(default_factory=list)


class InventoryLedger:
    """Authoritative collection of providers and vouchers."""

    def __init__(
        self,
        providers: Iterable[Provider] = (),
        vouchers: Iterable[Voucher] = (),
    ) -> None:
        self._providers: dict[int, Provider] = {}
        self._vouchers: dict[VoucherKey, Voucher] = {}
        for provider in providers:
            self.add_provider(provider)
        for voucher in vouchers:
            self.upsert_voucher(voucher)

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    @property
    def providers(self) -> list[Provider]:
        """Providers in ascending id order."""
        return list(self._providers.values())

    def find_provider(self, provider_id: int) -> Provider | None:
        return self._providers.get(provider_id)

    def next_provider_id(self) -> int:
        return max(self._providers, default=0) + 1

    def add_provider(self, provider: Provider) -> bool:
        """Insert a provider. Returns False (no change) if the id exists."""
        if provider.id in self._providers:
            return False
        self._providers[provider.id] = provider
        self._providers = dict(sorted(self._providers.items()))
        return True

    def delete_provider(self, provider_id: int) -> ProviderRemoval | None:
        """Remove a provider and all of its vouchers; None if it does not exist."""
        provider = self._providers.get(provider_id)
        if provider is None:
            return None

        removed = [v for v in self._vouchers.values() if v.provider_id == provider_id]
        del self._providers[provider_id]
        self._vouchers = {
            key: v for key, v in self._vouchers.items() if v.provider_id != provider_id
        }
        return ProviderRemoval(provider=provider, vouchers=removed)

    # ------------------------------------------------------------------
    # Vouchers
    # ------------------------------------------------------------------

    @property
    def vouchers(self) -> list[Voucher]:
        """Vouchers in insertion order."""
        return list(self._vouchers.values())

    def find_voucher(self, key: VoucherKey) -> Voucher | None:
        return self._vouchers.get(key)

    def upsert_voucher(self, voucher: Voucher) -> bool:
        """
        Insert or fully replace the voucher at its key.

        A replaced voucher keeps its position. Returns True when a new voucher
        was inserted.
        """
        key = voucher.key
        created = key not in self._vouchers
        self._vouchers[key] = voucher
        return created

    def update_voucher(self, voucher: Voucher) -> bool:
        """Replace an existing voucher in place; no-op if its key is unknown."""
        key = voucher.key
        if key not in self._vouchers:
            return False
        self._vouchers[key] = voucher
        return True

    def delete_voucher(self, key: VoucherKey) -> Voucher | None:
        return self._vouchers.pop(key, None)

    def list_by_provider(
        self,
        provider_id: int,
        search: str | None = None,
        sort_by: str | None = None,
        descending: bool = False,
    ) -> list[Voucher]:
        """
        List a provider's vouchers.

        Args:
            provider_id: Owning provider.
            search: Case-insensitive substring filter on the voucher name.
            sort_by: One of SORTABLE_FIELDS; insertion order when omitted.
            descending: Reverse the sort order.
        """
        result = [v for v in self._vouchers.values() if v.provider_id == provider_id]

        if search:
            needle = search.strip().lower()
            result = [v for v in result if needle in v.name.lower()]

        if sort_by is not None:
            if sort_by not in SORTABLE_FIELDS:
                raise ValueError(f"Cannot sort vouchers by {sort_by!r}")
            result.sort(key=lambda v: getattr(v, sort_by), reverse=descending)

        return result

    def orphaned_vouchers(self) -> list[Voucher]:
        """Vouchers whose provider no longer exists."""
        return [v for v in self._vouchers.values() if v.provider_id not in self._providers]
