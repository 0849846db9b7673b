"""In-memory collection store for ephemeral sessions and tests."""

import copy
import json
from typing import Any

from voucher_ledger.core.exceptions import DatabaseError
from voucher_ledger.core.interfaces.collection_store import ICollectionStore


class MemoryCollectionStore(ICollectionStore):
    """Keeps JSON round-tripped copies so stored values never alias callers' objects."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._data[key] = json.dumps(value)

    async def load(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return copy.deepcopy(default)
        return json.loads(self._data[key])

    async def save(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise DatabaseError("save", f"{key} is not JSON serializable: {e}") from e

    def keys(self) -> list[str]:
        return list(self._data)
