"""Activity log domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ActivityKind(str, Enum):
    """Kinds of audited ledger mutations."""

    SALE = "SALE"
    EDIT = "EDIT"
    DELETE_VOUCHER = "DELETE_VOUCHER"
    DELETE_PROVIDER = "DELETE_PROVIDER"
    IMPORT = "IMPORT"
    ADD_STOCK = "ADD_STOCK"


class ActivityLogEntry(BaseModel):
    """A single immutable audit trail entry."""

    model_config = ConfigDict(frozen=True)

    id: int  # strictly increasing, millisecond based
    timestamp: datetime
    kind: ActivityKind
    message: str
