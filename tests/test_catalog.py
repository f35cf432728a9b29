import os
import sys
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from catalog import pricing  # noqa: E402
from catalog.cart import Basket, Cart  # noqa: E402
from catalog.inventory import Inventory  # noqa: E402
from catalog.models import (  # noqa: E402
    CatalogItem,
    Comparison,
    ItemKind,
    OrderState,
    Status,
)
from catalog.order import Order  # noqa: E402
from catalog.store import SEED_BASIC, SEED_ELECTRONIC, Store, seeded_store  # noqa: E402


def book(name="Book A", price=50.0, rate=10.0, stock=20, ident="P001"):
    return CatalogItem.basic(name, ident, price, rate, stock)


def gadget(
    name="Phone X", price=800.0, rate=15.0, stock=5, power=20, warranty=12, fee=50.0
):
    return CatalogItem.electronic(name, "E001", price, rate, stock, power, warranty, fee)


class PricingTestCase(unittest.TestCase):
    def test_basic_effective_price_is_base_price(self):
        self.assertEqual(pricing.effective_price(book()), 50.0)

    def test_electronic_effective_price_adds_extra_fee(self):
        item = gadget()
        self.assertEqual(pricing.effective_price(item), 850.0)
        self.assertGreaterEqual(pricing.effective_price(item), item.price)

    def test_discounted_price(self):
        self.assertAlmostEqual(pricing.discounted_price(book(), 10.0), 45.0)
        self.assertAlmostEqual(pricing.discounted_price(gadget(), 15.0), 722.5)
        # caller supplied rate, independent of the stored one
        self.assertAlmostEqual(pricing.discounted_price(book(), 50.0), 25.0)

    def test_zero_rate_keeps_effective_price(self):
        for item in (book(rate=0.0), gadget(rate=0.0)):
            self.assertEqual(
                pricing.discounted_price(item, 0), pricing.effective_price(item)
            )
            self.assertEqual(pricing.unit_price(item), pricing.effective_price(item))

    def test_rate_above_hundred_is_not_guarded(self):
        self.assertLess(pricing.discounted_price(book(), 150.0), 0)

    def test_describe_basic(self):
        desc = pricing.describe(book())
        self.assertEqual(desc.name, "Book A")
        self.assertEqual(desc.effective_price, 50.0)
        self.assertAlmostEqual(desc.discounted_price, 45.0)
        self.assertIsNone(desc.power)
        self.assertIsNone(desc.warranty)
        self.assertFalse(desc.out_of_stock)

    def test_describe_electronic_and_flags(self):
        desc = pricing.describe(gadget(rate=0.0, stock=0))
        self.assertEqual(desc.effective_price, 850.0)
        self.assertIsNone(desc.discounted_price)
        self.assertEqual(desc.power, 20)
        self.assertEqual(desc.warranty, 12)
        self.assertTrue(desc.out_of_stock)

    def test_comparison_uses_effective_price_only(self):
        a = gadget(name="Phone X", price=800.0, fee=50.0, power=20, rate=15.0)
        b = gadget(name="Other", price=830.0, fee=20.0, power=99, rate=0.0, stock=1)
        self.assertTrue(pricing.price_equals(a, b))
        self.assertFalse(pricing.price_greater_than(a, b))
        self.assertEqual(pricing.compare_prices(a, b), Comparison.EQUAL)

        cheap = book(price=10.0)
        self.assertTrue(pricing.price_greater_than(book(), cheap))
        self.assertEqual(pricing.compare_prices(book(), cheap), Comparison.MORE_EXPENSIVE)
        self.assertEqual(pricing.compare_prices(cheap, book()), Comparison.LESS_EXPENSIVE)

    def test_equality_operator_is_identity(self):
        self.assertNotEqual(book(), book())
        item = book()
        self.assertEqual(item, item)

    def test_update_stock_replaces_value(self):
        item = book(stock=5)
        item.update_stock(40)
        self.assertEqual(item.stock, 40)


class InventoryTestCase(unittest.TestCase):
    def test_add_and_find(self):
        inv = Inventory(ItemKind.BASIC)
        inv.add(book("Book A"))
        inv.add(book("Pen D"))
        self.assertEqual(len(inv), 2)
        self.assertEqual(inv.find("Pen D"), 1)
        self.assertIsNone(inv.find("pen d"))
        self.assertIsNone(inv.find("Missing"))

    def test_find_returns_first_duplicate_and_remove_only_first(self):
        first, second = book("Dup", price=1.0), book("Dup", price=2.0)
        inv = Inventory(ItemKind.BASIC, [book("Other"), first, second])
        self.assertEqual(inv.find("Dup"), 1)
        self.assertIs(inv.get(inv.find("Dup")), first)

        self.assertTrue(inv.remove("Dup"))
        self.assertEqual(len(inv), 2)
        self.assertIs(inv.get(inv.find("Dup")), second)

    def test_index_of_matches_identity_not_name(self):
        first, second = book("Dup", price=1.0), book("Dup", price=2.0)
        inv = Inventory(ItemKind.BASIC, [first, second])
        self.assertEqual(inv.index_of(second), 1)
        self.assertIsNone(inv.index_of(book("Dup", price=2.0)))

        inv.remove("Dup")
        self.assertEqual(inv.index_of(second), 0)
        self.assertIsNone(inv.index_of(first))

    def test_remove_missing_is_noop(self):
        inv = Inventory(ItemKind.BASIC, [book()])
        self.assertFalse(inv.remove("Nope"))
        self.assertEqual(len(inv), 1)

    def test_items_snapshot_is_not_live(self):
        inv = Inventory(ItemKind.BASIC, [book()])
        snapshot = inv.items
        inv.add(book("Book B"))
        self.assertEqual(len(snapshot), 1)
        self.assertEqual([i.name for i in inv], ["Book A", "Book B"])


class CartTestCase(unittest.TestCase):
    def test_total_applies_discounts(self):
        cart = Cart(ItemKind.BASIC)
        cart.add(book(rate=10.0), 2)  # 45 * 2
        cart.add(book("Pen D", price=5.0, rate=0.0, stock=100), 3)  # 5 * 3
        self.assertAlmostEqual(cart.total(), 105.0)

    def test_total_follows_rate_changes(self):
        item = book(rate=10.0)
        cart = Cart(ItemKind.BASIC)
        cart.add(item, 1)
        self.assertAlmostEqual(cart.total(), 45.0)
        item.rate = 20.0
        self.assertAlmostEqual(cart.total(), 40.0)

    def test_duplicate_adds_create_separate_lines(self):
        item = book()
        cart = Cart(ItemKind.BASIC)
        cart.add(item, 1)
        cart.add(item, 2)
        self.assertEqual([line.qty for line in cart.lines()], [1, 2])

    def test_remove_and_find(self):
        cart = Cart(ItemKind.ELECTRONIC)
        cart.add(gadget(), 1)
        self.assertEqual(cart.find("Phone X"), 0)
        self.assertFalse(cart.remove("Laptop Z"))
        self.assertTrue(cart.remove("Phone X"))
        self.assertIsNone(cart.find("Phone X"))
        self.assertEqual(cart.total(), 0)

    def test_lines_are_restartable(self):
        cart = Cart(ItemKind.BASIC)
        cart.add(book(), 1)
        cart.add(book("Book B"), 1)
        self.assertEqual(list(cart), list(cart))
        self.assertEqual(len(list(cart.lines())), 2)

    def test_basket_routes_by_kind(self):
        basket = Basket()
        self.assertTrue(basket.is_empty())
        basket.for_kind(ItemKind.BASIC).add(book(), 2)
        basket.for_kind(ItemKind.ELECTRONIC).add(gadget(), 1)
        self.assertEqual(len(basket.basic), 1)
        self.assertEqual(len(basket.electronic), 1)
        self.assertEqual([l.item.name for l in basket.lines()], ["Book A", "Phone X"])
        self.assertAlmostEqual(basket.total(), 90.0 + 722.5)
        basket.clear()
        self.assertTrue(basket.is_empty())


class OrderTestCase(unittest.TestCase):
    def setUp(self):
        self.store = Store(
            Inventory(ItemKind.BASIC, [book(), book("Pen D", 5.0, 0.0, 100)]),
            Inventory(ItemKind.ELECTRONIC, [gadget()]),
        )
        self.basic_cart = Cart(ItemKind.BASIC)
        self.electronic_cart = Cart(ItemKind.ELECTRONIC)

    def _stock(self, inventory, name):
        return inventory.get(inventory.find(name)).stock

    def test_finalize_decrements_inventory_stock(self):
        self.basic_cart.add(self.store.basic.get(0), 2)
        self.electronic_cart.add(self.store.electronic.get(0), 1)

        order = Order(self.store)
        self.assertEqual(order.state, OrderState.CREATED)
        outcomes = order.finalize(self.basic_cart, self.electronic_cart)

        self.assertEqual(order.state, OrderState.FINALIZED)
        self.assertTrue(all(o.status == Status.OK for o in outcomes))
        self.assertEqual(self._stock(self.store.basic, "Book A"), 18)
        self.assertEqual(self._stock(self.store.electronic, "Phone X"), 4)

    def test_finalize_resolves_by_name_not_by_cart_copy(self):
        # a line holding a detached copy still decrements the inventory item
        self.basic_cart.add(book(), 2)
        Order(self.store).finalize(self.basic_cart, self.electronic_cart)
        self.assertEqual(self._stock(self.store.basic, "Book A"), 18)

    def test_finalize_decrements_the_carted_duplicate(self):
        # an earlier item with the same name must not absorb the order
        sold_out = book("Mug", 6.0, 0.0, 0, ident="P100")
        carted = book("Mug", 6.0, 0.0, 5, ident="P101")
        self.store.basic.add(sold_out)
        self.store.basic.add(carted)
        self.basic_cart.add(carted, 3)

        order = Order(self.store)
        outcomes = order.finalize(self.basic_cart, self.electronic_cart)

        self.assertEqual(outcomes[0].status, Status.OK)
        self.assertEqual(carted.stock, 2)
        self.assertEqual(sold_out.stock, 0)

    def test_missing_item_is_skipped_and_others_complete(self):
        self.basic_cart.add(self.store.basic.get(0), 2)
        self.basic_cart.add(self.store.basic.get(1), 3)
        self.store.basic.remove("Book A")

        order = Order(self.store)
        outcomes = order.finalize(self.basic_cart, self.electronic_cart)

        self.assertEqual(
            [o.status for o in outcomes], [Status.NOT_FOUND, Status.OK]
        )
        self.assertEqual(len(order.failed_lines()), 1)
        self.assertEqual(self._stock(self.store.basic, "Pen D"), 97)
        # the receipt total keeps the skipped line, the charged total does not
        self.assertAlmostEqual(order.summary().total, 105.0)
        self.assertAlmostEqual(order.charged_total(), 15.0)

    def test_quantity_above_current_stock_is_reported(self):
        phone = self.store.electronic.get(0)
        self.electronic_cart.add(phone, 4)
        phone.update_stock(2)

        outcomes = Order(self.store).finalize(self.basic_cart, self.electronic_cart)
        self.assertEqual(outcomes[0].status, Status.STOCK_MISMATCH)
        self.assertEqual(phone.stock, 2)

    def test_finalize_twice_does_not_decrement_again(self):
        self.basic_cart.add(self.store.basic.get(0), 2)
        order = Order(self.store)
        order.finalize(self.basic_cart, self.electronic_cart)
        again = order.finalize(self.basic_cart, self.electronic_cart)
        self.assertEqual(len(again), 1)
        self.assertEqual(self._stock(self.store.basic, "Book A"), 18)

    def test_summary(self):
        order = Order(self.store)
        empty = order.summary()
        self.assertEqual(empty.lines, ())
        self.assertEqual(empty.total, 0)

        self.basic_cart.add(self.store.basic.get(0), 2)
        self.electronic_cart.add(self.store.electronic.get(0), 1)
        order.finalize(self.basic_cart, self.electronic_cart)

        summary = order.summary()
        self.assertEqual([l.item.name for l in summary.lines], ["Book A", "Phone X"])
        self.assertAlmostEqual(summary.total, 812.5)
        # reading twice changes nothing
        self.assertAlmostEqual(order.summary().total, 812.5)
        self.assertEqual(self._stock(self.store.basic, "Book A"), 18)


class StoreTestCase(unittest.TestCase):
    def test_seeded_store(self):
        store = seeded_store()
        self.assertEqual(len(store.basic), len(SEED_BASIC))
        self.assertEqual(len(store.electronic), len(SEED_ELECTRONIC))
        self.assertTrue(all(i.kind == ItemKind.BASIC for i in store.basic))
        self.assertTrue(all(i.kind == ItemKind.ELECTRONIC for i in store.electronic))

        lamp = store.basic.get(store.basic.find("Desk Lamp"))
        self.assertEqual(lamp.stock, 0)
        laptop = store.electronic.get(store.electronic.find("Laptop Z"))
        self.assertEqual(pricing.effective_price(laptop), 1280.0)

    def test_seeded_stores_are_independent(self):
        a, b = seeded_store(), seeded_store()
        a.basic.get(0).update_stock(0)
        self.assertEqual(b.basic.get(0).stock, 20)

    def test_inventory_for(self):
        store = Store()
        self.assertIs(store.inventory_for(ItemKind.BASIC), store.basic)
        self.assertIs(store.inventory_for(ItemKind.ELECTRONIC), store.electronic)


if __name__ == "__main__":
    unittest.main()
