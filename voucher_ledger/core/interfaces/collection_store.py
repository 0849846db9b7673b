"""Abstract interface for keyed collection persistence."""

from abc import ABC, abstractmethod
from typing import Any


class ICollectionStore(ABC):
    """Load-all/save-all persistence of JSON-serializable collections by name."""

    @abstractmethod
    async def load(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default when absent or unreadable."""
        pass

    @abstractmethod
    async def save(self, key: str, value: Any) -> None:
        """Replace the stored value for key. Raises StorageError on failure."""
        pass
