# provide dataclass models for the in-memory catalog
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Optional, Tuple


class ItemKind(StrEnum):
    BASIC = "basic"
    ELECTRONIC = "electronic"


class Status(Enum):
    """
    Outcome of a catalog operation. Nothing in the core raises for these,
    callers inspect the status instead.
    """

    OK = "ok"
    INVALID_INPUT = "invalid input"
    NOT_FOUND = "not found"
    OUT_OF_STOCK = "out of stock"
    STOCK_MISMATCH = "stock mismatch"


class Comparison(Enum):
    EQUAL = "equal"
    MORE_EXPENSIVE = "more expensive"
    LESS_EXPENSIVE = "less expensive"


class OrderState(Enum):
    CREATED = "created"
    FINALIZED = "finalized"


# eq=False: `==` stays identity, price comparison lives in catalog.pricing
@dataclass(eq=False)
class CatalogItem:
    name: str
    ident: str
    price: float
    rate: float
    stock: int
    kind: ItemKind = ItemKind.BASIC
    power: int = 0  # W, electronics only
    warranty: int = 0  # months, electronics only
    extra_fee: float = 0.0  # electronics only

    @classmethod
    def basic(
        cls, name: str, ident: str, price: float, rate: float, stock: int
    ) -> CatalogItem:
        return cls(name, ident, price, rate, stock, ItemKind.BASIC)

    @classmethod
    def electronic(
        cls,
        name: str,
        ident: str,
        price: float,
        rate: float,
        stock: int,
        power: int,
        warranty: int,
        extra_fee: float,
    ) -> CatalogItem:
        return cls(
            name,
            ident,
            price,
            rate,
            stock,
            ItemKind.ELECTRONIC,
            power=power,
            warranty=warranty,
            extra_fee=extra_fee,
        )

    def update_stock(self, new_amount: int) -> None:
        """Replace the stock quantity. Restocking above the previous value is allowed."""
        self.stock = new_amount


@dataclass(frozen=True)
class ItemDescription:
    name: str
    effective_price: float
    rate: float
    discounted_price: Optional[float]  # None when rate == 0
    power: Optional[int]  # None for basic items
    warranty: Optional[int]
    stock: int
    out_of_stock: bool


@dataclass(frozen=True)
class CartLine:
    item: CatalogItem
    qty: int


@dataclass(frozen=True)
class OrderLine:
    item: CatalogItem
    qty: int
    status: Status


@dataclass(frozen=True)
class OrderSummary:
    lines: Tuple[CartLine, ...]
    total: float
