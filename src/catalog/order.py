from __future__ import annotations

from typing import List, Tuple

from catalog.cart import Cart
from catalog.inventory import Inventory
from catalog.models import CartLine, OrderLine, OrderState, OrderSummary, Status
from catalog.pricing import line_subtotal
from catalog.store import Store
from utils.logger import get_logger

_logger = get_logger(__name__)


class Order:
    """
    One-shot checkout of a basic and an electronic cart.

    `finalize` moves the order from CREATED to FINALIZED exactly once. Each
    cart line is looked up again by name in the store's inventory and the
    stock of that inventory item is decremented. A line whose item is gone,
    or whose quantity exceeds the current stock, is skipped and reported;
    the other lines still go through.
    """

    def __init__(self, store: Store) -> None:
        self.store = store
        self.state = OrderState.CREATED
        self._lines: Tuple[CartLine, ...] = ()
        self._outcomes: List[OrderLine] = []

    @property
    def outcomes(self) -> Tuple[OrderLine, ...]:
        return tuple(self._outcomes)

    def failed_lines(self) -> List[OrderLine]:
        return [o for o in self._outcomes if o.status != Status.OK]

    def finalize(self, basic_cart: Cart, electronic_cart: Cart) -> List[OrderLine]:
        if self.state == OrderState.FINALIZED:
            _logger.warning("Order already finalized, nothing changed.")
            return list(self._outcomes)

        self._lines = basic_cart.lines() + electronic_cart.lines()

        for cart in (basic_cart, electronic_cart):
            inventory = self.store.inventory_for(cart.kind)
            for line in cart.lines():
                self._outcomes.append(
                    OrderLine(line.item, line.qty, self._apply(inventory, line))
                )

        self.state = OrderState.FINALIZED
        _logger.info(
            f"Order finalized: {len(self._lines)} lines, "
            f"{len(self.failed_lines())} skipped."
        )
        return list(self._outcomes)

    def _apply(self, inventory: Inventory, line: CartLine) -> Status:
        # the carted object itself, else the first item with its name
        idx = inventory.index_of(line.item)
        if idx is None:
            idx = inventory.find(line.item.name)
        if idx is None:
            _logger.warning(f"'{line.item.name}' is no longer in the catalog.")
            return Status.NOT_FOUND

        stocked = inventory.get(idx)
        if line.qty > stocked.stock:
            _logger.warning(
                f"'{stocked.name}': ordered {line.qty} but only {stocked.stock} left."
            )
            return Status.STOCK_MISMATCH

        stocked.update_stock(stocked.stock - line.qty)
        return Status.OK

    def summary(self) -> OrderSummary:
        total = sum(line_subtotal(line.item, line.qty) for line in self._lines)
        return OrderSummary(lines=self._lines, total=total)

    def charged_total(self) -> float:
        """Total over the lines that were actually fulfilled."""
        return sum(
            line_subtotal(o.item, o.qty) for o in self._outcomes if o.status == Status.OK
        )
