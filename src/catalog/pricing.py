"""
Price capabilities of a catalog item, dispatched on its kind tag.

Basic items cost their base price. Electronics add the extra fee on top
before any discount is applied. Comparisons only ever look at that
effective price, never at name, stock or discount rate.
"""

from typing import assert_never

from catalog.models import CatalogItem, Comparison, ItemDescription, ItemKind


def effective_price(item: CatalogItem) -> float:
    match item.kind:
        case ItemKind.BASIC:
            return item.price
        case ItemKind.ELECTRONIC:
            return item.price + item.extra_fee
        case _:
            assert_never(item.kind)


def discounted_price(item: CatalogItem, rate: float) -> float:
    """
    Effective price reduced by `rate` percent.

    The rate is not bounds-checked: anything above 100 gives a negative price.
    """
    return effective_price(item) * (1 - rate / 100)


def unit_price(item: CatalogItem) -> float:
    """Price charged per unit, using the item's stored rate at call time."""
    if item.rate == 0:
        return effective_price(item)
    return discounted_price(item, item.rate)


def line_subtotal(item: CatalogItem, qty: int) -> float:
    return unit_price(item) * qty


def describe(item: CatalogItem) -> ItemDescription:
    disc = discounted_price(item, item.rate) if item.rate != 0 else None
    match item.kind:
        case ItemKind.BASIC:
            power, warranty = None, None
        case ItemKind.ELECTRONIC:
            power, warranty = item.power, item.warranty
        case _:
            assert_never(item.kind)

    return ItemDescription(
        name=item.name,
        effective_price=effective_price(item),
        rate=item.rate,
        discounted_price=disc,
        power=power,
        warranty=warranty,
        stock=item.stock,
        out_of_stock=item.stock == 0,
    )


def price_equals(a: CatalogItem, b: CatalogItem) -> bool:
    return effective_price(a) == effective_price(b)


def price_greater_than(a: CatalogItem, b: CatalogItem) -> bool:
    return effective_price(a) > effective_price(b)


def compare_prices(a: CatalogItem, b: CatalogItem) -> Comparison:
    if price_equals(a, b):
        return Comparison.EQUAL
    if price_greater_than(a, b):
        return Comparison.MORE_EXPENSIVE
    return Comparison.LESS_EXPENSIVE
