"""Inventory domain entities: providers, vouchers and their natural key."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_voucher_name(name: str) -> str:
    """Strip and collapse inner whitespace. Case is preserved."""
    return _WHITESPACE_RE.sub(" ", name.strip())


class Provider(BaseModel):
    """A voucher brand (e.g. a telecom operator) that owns vouchers."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    logo_url: str | None = None  # display only

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("provider name must not be blank")
        return v


class VoucherKey(BaseModel):
    """Composite natural key of a voucher: provider id plus normalized name."""

    model_config = ConfigDict(frozen=True)

    provider_id: int
    name: str

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = normalize_voucher_name(v)
        if not v:
            raise ValueError("voucher name must not be blank")
        return v

    def __str__(self) -> str:
        return f"{self.provider_id}-{self.name}"


class Voucher(BaseModel):
    """A sellable voucher product with stock counters and prices (whole Rupiah)."""

    model_config = ConfigDict(frozen=True)

    provider_id: int  # soft reference to Provider.id
    name: str
    total_stock: int = Field(default=0, ge=0)
    remaining_stock: int = Field(default=0, ge=0)
    cost_price: int = Field(default=0, ge=0)
    sell_price: int = Field(default=0, ge=0)
    planned_stock: int = Field(default=0, ge=0)  # pending restock target

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = normalize_voucher_name(v)
        if not v:
            raise ValueError("voucher name must not be blank")
        return v

    @property
    def key(self) -> VoucherKey:
        return VoucherKey(provider_id=self.provider_id, name=self.name)

    @property
    def is_consistent(self) -> bool:
        """True when remaining stock does not exceed total stock."""
        return self.remaining_stock <= self.total_stock

    @property
    def sold(self) -> int:
        return self.total_stock - self.remaining_stock

    @property
    def sales_total(self) -> int:
        return self.sold * self.sell_price

    @property
    def cost_of_sold(self) -> int:
        return self.sold * self.cost_price

    @property
    def profit(self) -> int:
        return self.sales_total - self.cost_of_sold

    @property
    def stock_value(self) -> int:
        """Cost of everything ever stocked."""
        return self.total_stock * self.cost_price

    @property
    def planned_cost(self) -> int:
        """Estimated cost of the pending restock."""
        return self.planned_stock * self.cost_price
