"""
Ledger session: owns the ledger, its activity log and their persistence.

The session is the explicit replacement for module-level mutable state. It
loads all three collections once, hands out a StockOperations bound to the
loaded ledger, and writes everything back on ``save()``. Saving is
fire-and-forget: a storage failure is logged and the in-memory state stays
as it is.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from voucher_ledger.config import get_logger
from voucher_ledger.core.entities.activity import ActivityLogEntry
from voucher_ledger.core.entities.inventory import Provider, Voucher
from voucher_ledger.core.exceptions import StorageError
from voucher_ledger.core.interfaces.collection_store import ICollectionStore
from voucher_ledger.core.services.activity_log import ActivityLog
from voucher_ledger.core.services.ledger import InventoryLedger
from voucher_ledger.core.services.pricing import PricingRule
from voucher_ledger.core.services.stock_operations import StockOperations

logger = get_logger(__name__)

PROVIDERS_KEY = "providers"
VOUCHERS_KEY = "vouchers"
ACTIVITY_KEY = "activity_logs"

DEFAULT_PROVIDERS: tuple[Provider, ...] = (
    Provider(
        id=1,
        name="Telkomsel",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/b/bc/Telkomsel_2021_icon.svg",
    ),
    Provider(
        id=2,
        name="IM3",
        logo_url="https://im3-img.indosatooredoo.com/indosatassets/images/icons/icon-512x512.png",
    ),
    Provider(id=3, name="Three", logo_url="https://iconape.com/wp-content/png_logo_vector/3-logo-2.png"),
    Provider(
        id=4,
        name="XL",
        logo_url="https://static.vecteezy.com/system/resources/previews/071/673/737/non_2x/xl-axiata-logo-glossy-square-xl-axiata-telecom-symbol-free-png.png",
    ),
    Provider(
        id=5,
        name="Axis",
        logo_url="https://upload.wikimedia.org/wikipedia/commons/thumb/8/83/Axis_logo_2015.svg/1200px-Axis_logo_2015.svg.png",
    ),
    Provider(
        id=6,
        name="Smartfren",
        logo_url="https://images.seeklogo.com/logo-png/20/2/smartfren-logo-png_seeklogo-202951.png",
    ),
    Provider(id=7, name="By.U", logo_url="https://bigrit.com/wp-content/uploads/2020/11/byu.png"),
)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_records(key: str, raw: Any, model: type[ModelT]) -> list[ModelT]:
    """Validate stored records, dropping the ones that no longer parse."""
    if not isinstance(raw, list):
        logger.warning("collection_not_a_list", key=key, type=type(raw).__name__)
        return []

    records: list[ModelT] = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except PydanticValidationError as e:
            logger.warning("stored_record_invalid", key=key, index=index, errors=e.error_count())
    return records


class LedgerSession:
    """Single-writer owner of the ledger state."""

    def __init__(
        self,
        store: ICollectionStore,
        pricing: PricingRule | None = None,
        seed_default_providers: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._pricing = pricing or PricingRule()
        self._seed_default_providers = seed_default_providers
        self._clock = clock
        self._loaded = False
        self._reset(InventoryLedger(), self._new_log())

    def _new_log(self) -> ActivityLog:
        return ActivityLog(clock=self._clock) if self._clock else ActivityLog()

    def _reset(self, ledger: InventoryLedger, activity_log: ActivityLog) -> None:
        self._ledger = ledger
        self._activity_log = activity_log
        self._operations = StockOperations(ledger, activity_log, self._pricing)

    @property
    def ledger(self) -> InventoryLedger:
        return self._ledger

    @property
    def activity_log(self) -> ActivityLog:
        return self._activity_log

    @property
    def operations(self) -> StockOperations:
        return self._operations

    @property
    def pricing(self) -> PricingRule:
        return self._pricing

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def _load_collection(self, key: str) -> Any:
        try:
            return await self._store.load(key, None)
        except StorageError as e:
            logger.error("collection_load_failed", key=key, error=e.message)
            return None

    async def load(self) -> None:
        """Replace in-memory state with the stored collections."""
        raw_providers = await self._load_collection(PROVIDERS_KEY)
        raw_vouchers = await self._load_collection(VOUCHERS_KEY)
        raw_entries = await self._load_collection(ACTIVITY_KEY)

        if raw_providers is None:
            providers = list(DEFAULT_PROVIDERS) if self._seed_default_providers else []
        else:
            providers = _parse_records(PROVIDERS_KEY, raw_providers, Provider)

        vouchers = [] if raw_vouchers is None else _parse_records(VOUCHERS_KEY, raw_vouchers, Voucher)
        entries = (
            [] if raw_entries is None else _parse_records(ACTIVITY_KEY, raw_entries, ActivityLogEntry)
        )

        activity_log = self._new_log()
        activity_log.restore(entries)
        self._reset(InventoryLedger(providers, vouchers), activity_log)
        self._loaded = True

        logger.info(
            "ledger_loaded",
            providers=len(providers),
            vouchers=len(vouchers),
            activity_entries=len(entries),
        )

    async def save(self) -> bool:
        """Write all collections. Returns False if any write failed."""
        payloads = {
            PROVIDERS_KEY: [p.model_dump(mode="json") for p in self._ledger.providers],
            VOUCHERS_KEY: [v.model_dump(mode="json") for v in self._ledger.vouchers],
            ACTIVITY_KEY: [e.model_dump(mode="json") for e in self._activity_log.entries],
        }

        ok = True
        for key, payload in payloads.items():
            try:
                await self._store.save(key, payload)
            except StorageError as e:
                ok = False
                logger.error("ledger_save_failed", key=key, error=e.message)
        return ok
