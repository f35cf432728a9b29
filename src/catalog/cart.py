from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from catalog.models import CartLine, CatalogItem, ItemKind
from catalog.pricing import line_subtotal


class Cart:
    """
    Selected (item, quantity) lines of one item kind.

    Lines hold the inventory's own item objects, so the price of a line is
    always computed from the item's current rate. The cart trusts what it is
    given; quantities are validated in catalog.crud before `add` is called.
    """

    def __init__(self, kind: ItemKind) -> None:
        self.kind = kind
        self._lines: List[CartLine] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines())

    def add(self, item: CatalogItem, qty: int) -> None:
        # duplicate adds are kept as separate lines
        self._lines.append(CartLine(item, qty))

    def find(self, name: str) -> Optional[int]:
        for idx, line in enumerate(self._lines):
            if line.item.name == name:
                return idx
        return None

    def get(self, index: int) -> CartLine:
        return self._lines[index]

    def remove(self, name: str) -> bool:
        idx = self.find(name)
        if idx is None:
            return False
        del self._lines[idx]
        return True

    def clear(self) -> None:
        self._lines.clear()

    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def total(self) -> float:
        return sum(line_subtotal(line.item, line.qty) for line in self._lines)


@dataclass
class Basket:
    """The basic and electronic carts of one customer session."""

    basic: Cart = field(default_factory=lambda: Cart(ItemKind.BASIC))
    electronic: Cart = field(default_factory=lambda: Cart(ItemKind.ELECTRONIC))

    def for_kind(self, kind: ItemKind) -> Cart:
        return self.basic if kind == ItemKind.BASIC else self.electronic

    def lines(self) -> Tuple[CartLine, ...]:
        return self.basic.lines() + self.electronic.lines()

    def total(self) -> float:
        return self.basic.total() + self.electronic.total()

    def is_empty(self) -> bool:
        return not self.basic and not self.electronic

    def clear(self) -> None:
        self.basic.clear()
        self.electronic.clear()
