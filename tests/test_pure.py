import os
import sys
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from catalog.models import CartLine, CatalogItem, Comparison, OrderLine, Status  # noqa: E402
from catalog.pricing import describe  # noqa: E402
from utils import pure  # noqa: E402

BOOK = CatalogItem.basic("Book A", "P001", 50.0, 10.0, 20)
PEN = CatalogItem.basic("Pen D", "P004", 5.0, 0.0, 100)
PHONE = CatalogItem.electronic("Phone X", "E001", 800.0, 15.0, 5, 20, 12, 50.0)
LAMP = CatalogItem.basic("Desk Lamp", "P007", 80.0, 8.0, 0)


class FormatTestCase(unittest.TestCase):
    def test_format_amount(self):
        self.assertEqual(pure.format_amount(850.0), "850")
        self.assertEqual(pure.format_amount(722.5), "722.5")
        self.assertEqual(pure.format_amount(73.6), "73.6")
        self.assertEqual(pure.format_amount(100.0), "100")
        self.assertEqual(pure.format_amount(0.0), "0")
        self.assertEqual(pure.format_amount(-0.001), "0")
        self.assertEqual(pure.format_amount(1 / 3), "0.33")

    def test_format_rate_keeps_significant_digits(self):
        self.assertEqual(pure.format_rate(10.0), "10")
        self.assertEqual(pure.format_rate(12.345), "12.345")
        self.assertEqual(pure.format_rate(7.5), "7.5")

        odd = CatalogItem.basic("Odd", "P200", 200.0, 12.345, 1)
        self.assertIn(
            "Price (applying 12.345% discount): 175.31", pure.describe_lines(describe(odd))
        )

    def test_generate_markdown_table(self):
        md = pure.generate_markdown_table(["A", "B"], [[1, 2]], ["l", "r"])
        self.assertEqual(md, "| A | B |\n| :--- | ---: |\n| 1 | 2 |")

        # first row promoted to header
        md = pure.generate_markdown_table(None, [["k", "v"], ["Role", "Customer"]])
        self.assertTrue(md.startswith("| k | v |\n| :---: | :---: |"))

        self.assertEqual(pure.generate_markdown_table(["A"], []), "")
        with self.assertRaises(ValueError):
            pure.generate_markdown_table(["A", "B"], [[1, 2]], ["l"])


class DescribeTestCase(unittest.TestCase):
    def test_basic_with_discount(self):
        self.assertEqual(
            pure.describe_lines(describe(BOOK)),
            [
                "Name: Book A",
                "Price: 50",
                "Price (applying 10% discount): 45",
                "Amount: 20",
            ],
        )

    def test_no_discount_line_when_rate_is_zero(self):
        lines = pure.describe_lines(describe(PEN))
        self.assertFalse(any("discount" in line for line in lines))

    def test_electronic(self):
        self.assertEqual(
            pure.describe_lines(describe(PHONE)),
            [
                "Name: Phone X",
                "Price: 850",
                "Price (applying 15% discount): 722.5",
                "Power: 20",
                "Warranty Time: 12",
                "Amount: 5",
            ],
        )

    def test_out_of_stock_flag(self):
        lines = pure.describe_lines(describe(LAMP))
        self.assertEqual(lines[0], "(Out of stock)")
        self.assertIn("Price (applying 8% discount): 73.6", lines)
        self.assertEqual(lines[-1], "Amount: 0")

    def test_render_item_md(self):
        md = pure.render_item_md(describe(PEN))
        self.assertTrue(md.startswith("### Pen D"))
        self.assertIn("- Price: 5", md)

    def test_catalog_rows(self):
        rows = pure.catalog_rows([BOOK, LAMP, PEN, PHONE])
        self.assertEqual(rows[0], ["basic", "Book A", "P001", "50", "45", "20"])
        self.assertEqual(rows[1][-1], "out of stock")
        self.assertEqual(rows[2][4], "")
        self.assertEqual(rows[3][:4], ["electronic", "Phone X", "E001", "850"])
        self.assertEqual(len(rows[0]), len(pure.CATALOG_COLUMNS))


class CartRenderTestCase(unittest.TestCase):
    def test_subtotal_only_when_quantity_is_not_one(self):
        two = pure.cart_line_lines(CartLine(BOOK, 2))
        self.assertEqual(two[-2:], ["Quantity: 2", "Subtotal: 90"])

        one = pure.cart_line_lines(CartLine(PHONE, 1))
        self.assertEqual(one[-1], "Quantity: 1")
        self.assertFalse(any(line.startswith("Subtotal") for line in one))

    def test_render_cart_md(self):
        md = pure.render_cart_md([CartLine(BOOK, 2), CartLine(PHONE, 1)], 812.5)
        self.assertIn("- Name: Book A", md)
        self.assertIn("- Subtotal: 90", md)
        self.assertTrue(md.endswith("**Total: 812.5**"))

        self.assertIn("empty", pure.render_cart_md([], 0))

    def test_render_receipt(self):
        receipt = pure.render_receipt(
            [CartLine(BOOK, 2), CartLine(PHONE, 1), CartLine(PEN, 1)], 872.5 - 55.0
        )
        lines = receipt.splitlines()
        self.assertEqual(lines[0], "ORDER DETAILS:")
        self.assertIn("Name: Pen D", lines)
        self.assertEqual(lines[-1], "Total: 817.5")

    def test_render_receipt_with_charged_total(self):
        receipt = pure.render_receipt([CartLine(BOOK, 2), CartLine(PEN, 1)], 95.0, 90.0)
        lines = receipt.splitlines()
        self.assertEqual(lines[-2:], ["Total: 95", "Charged: 90"])
        self.assertNotIn("Charged", pure.render_receipt([CartLine(PEN, 1)], 5.0))

    def test_render_skipped(self):
        notes = pure.render_skipped(
            [
                OrderLine(BOOK, 2, Status.OK),
                OrderLine(PEN, 3, Status.NOT_FOUND),
                OrderLine(PHONE, 9, Status.STOCK_MISMATCH),
            ]
        )
        self.assertEqual(len(notes), 2)
        self.assertIn("Pen D", notes[0])
        self.assertIn("9 requested, only 5 in stock", notes[1])

    def test_comparison_sentence(self):
        self.assertEqual(
            pure.comparison_sentence("Book A", "Book B", Comparison.MORE_EXPENSIVE),
            "Book A is more expensive than Book B",
        )
        self.assertEqual(
            pure.comparison_sentence("A", "B", Comparison.EQUAL),
            "A's price is equal to B's price",
        )
        self.assertEqual(
            pure.comparison_sentence("A", "B", Comparison.LESS_EXPENSIVE),
            "A is less expensive than B",
        )


if __name__ == "__main__":
    unittest.main()
