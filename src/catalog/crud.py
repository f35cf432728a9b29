# src/catalog/crud.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from catalog.cart import Basket
from catalog.models import CatalogItem, Comparison, ItemKind, Status
from catalog.order import Order
from catalog.pricing import compare_prices
from catalog.store import Store
from utils.logger import get_logger

_logger = get_logger(__name__)


def _to_int(val) -> Optional[int]:
    try:
        return int(str(val).strip())
    except (TypeError, ValueError):
        return None


def _to_float(val) -> Optional[float]:
    try:
        return float(str(val).strip())
    except (TypeError, ValueError):
        return None


# ---------------------------
# Roles
# ---------------------------


def resolve_role(raw: str) -> Optional[Literal["customer", "manager"]]:
    """'1' is a customer, '2' a manager; anything else is None."""
    return {"1": "customer", "2": "manager"}.get((raw or "").strip())


# ---------------------------
# Catalog lookup
# ---------------------------


def find_item(store: Store, name: str) -> Optional[CatalogItem]:
    """
    Exact, case-sensitive lookup. The basic inventory is searched before the
    electronic one, so a basic item shadows an electronic item of the same name.
    """
    for inventory in (store.basic, store.electronic):
        idx = inventory.find(name)
        if idx is not None:
            return inventory.get(idx)
    return None


def list_items(store: Store) -> List[CatalogItem]:
    """All catalog items, basic first, in inventory order."""
    return list(store.basic.items + store.electronic.items)


# ---------------------------
# Cart Management
# ---------------------------


def parse_quantity(raw, item: CatalogItem) -> Tuple[Status, Optional[int]]:
    """
    Validate a requested quantity against the item's current stock.
    Accepts 1..stock; an item with no stock is OUT_OF_STOCK whatever was asked.
    """
    if item.stock == 0:
        return Status.OUT_OF_STOCK, None
    qty = _to_int(raw)
    if qty is None or qty < 1 or qty > item.stock:
        return Status.INVALID_INPUT, None
    return Status.OK, qty


def add_to_cart(store: Store, basket: Basket, name: str, qty) -> Status:
    """
    Put `qty` of the named item into the cart of its kind.
    The cart is left untouched unless the result is OK.
    """
    item = find_item(store, name)
    if item is None:
        return Status.NOT_FOUND
    return add_item_to_cart(basket, item, qty)


def add_item_to_cart(basket: Basket, item: CatalogItem, qty) -> Status:
    """Same as add_to_cart for an item the caller already holds."""
    status, valid_qty = parse_quantity(qty, item)
    if status != Status.OK:
        _logger.debug(f"Rejected {qty!r} x '{item.name}': {status.value}.")
        return status

    basket.for_kind(item.kind).add(item, valid_qty)
    _logger.info(f"Added {valid_qty} x '{item.name}' to the {item.kind} cart.")
    return Status.OK


def remove_from_cart(basket: Basket, name: str) -> Status:
    """Remove the first line called `name`, looking in the basic cart first."""
    for cart in (basket.basic, basket.electronic):
        if cart.remove(name):
            _logger.info(f"Removed '{name}' from the {cart.kind} cart.")
            return Status.OK
    return Status.NOT_FOUND


def compare_in_cart(
    basket: Basket, kind: ItemKind, first: str, second: str
) -> Tuple[Status, Optional[Comparison]]:
    """Compare two lines of the same cart by effective price."""
    if first == second:
        return Status.INVALID_INPUT, None

    cart = basket.for_kind(kind)
    idx_a, idx_b = cart.find(first), cart.find(second)
    if idx_a is None or idx_b is None:
        return Status.NOT_FOUND, None

    return Status.OK, compare_prices(cart.get(idx_a).item, cart.get(idx_b).item)


# ---------------------------
# Checkout & Orders
# ---------------------------


def checkout(store: Store, basket: Basket) -> Order:
    """Finalize an order from both carts, then empty the basket."""
    order = Order(store)
    order.finalize(basket.basic, basket.electronic)
    basket.clear()
    return order


# ---------------------------
# Catalog Management (Manager)
# ---------------------------


def parse_new_product(
    kind: ItemKind, fields: Dict[str, str]
) -> Tuple[Status, Optional[CatalogItem]]:
    """
    Build an item from raw form values.

    Expected keys: name, ident, price, rate, stock and, for electronics,
    power, warranty and extra_fee. A blank rate means no discount.
    """
    name = (fields.get("name") or "").strip()
    ident = (fields.get("ident") or "").strip()
    price = _to_float(fields.get("price"))
    rate_raw = (fields.get("rate") or "").strip()
    rate = _to_float(rate_raw) if rate_raw else 0.0
    stock = _to_int(fields.get("stock"))

    if not name or not ident:
        return Status.INVALID_INPUT, None
    if price is None or rate is None or stock is None:
        return Status.INVALID_INPUT, None
    if price < 0 or stock < 0:
        return Status.INVALID_INPUT, None

    if kind == ItemKind.BASIC:
        return Status.OK, CatalogItem.basic(name, ident, price, rate, stock)

    power = _to_int(fields.get("power"))
    warranty = _to_int(fields.get("warranty"))
    extra_fee = _to_float(fields.get("extra_fee"))
    if power is None or warranty is None or extra_fee is None or extra_fee < 0:
        return Status.INVALID_INPUT, None

    return Status.OK, CatalogItem.electronic(
        name, ident, price, rate, stock, power, warranty, extra_fee
    )


def add_product(store: Store, item: CatalogItem) -> Status:
    store.inventory_for(item.kind).add(item)
    _logger.info(f"Manager added {item.kind} item '{item.name}' ({item.ident}).")
    return Status.OK


def remove_product(store: Store, name: str) -> Status:
    """Remove the first item called `name`, basic inventory first."""
    if store.basic.find(name) is not None:
        store.basic.remove(name)
        return Status.OK
    if store.electronic.find(name) is not None:
        store.electronic.remove(name)
        return Status.OK
    _logger.info(f"No item named '{name}' to remove.")
    return Status.NOT_FOUND
