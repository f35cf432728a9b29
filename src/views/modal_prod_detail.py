from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.validation import Number
from textual.widgets import Button, Input, Label, MarkdownViewer

from catalog.crud import add_item_to_cart
from catalog.models import CatalogItem, Status
from catalog.pricing import describe
from utils.pure import render_item_md


class ProdDetailModal(ModalScreen[bool]):
    """
    prod detail, plus adding to cart.
    Returns True if the cart changed, False if not.
    """

    CSS = """
    #input-order-qty {
        width: 10;
    }
    #btn-sub-qty {
        min-width: 4
    }
    #btn-add-qty {
        min-width: 4
    }
    """

    order_qty = reactive(1)

    def __init__(self, item: CatalogItem) -> None:
        super().__init__()
        self._item = item

    def compose(self) -> ComposeResult:
        with Horizontal(id="hort-prod-detail"):
            yield MarkdownViewer("", show_table_of_contents=False)
            with Vertical():
                yield Label("Order Quantity")
                with Horizontal():
                    yield Button("-", id="btn-sub-qty")
                    yield Input(value="1", id="input-order-qty", type="integer")
                    yield Button("+", id="btn-add-qty")
                with Horizontal():
                    yield Button("Go Back", id="btn-quit")
                    yield Button("Add to Cart", id="btn-addcart", variant="primary")

    async def on_mount(self):
        await self.query_one(MarkdownViewer).document.update(
            render_item_md(describe(self._item))
        )

        stock_cnt = self._item.stock
        if stock_cnt < 1:
            order_btn = self.query_one("#btn-addcart", Button)
            order_btn.label = "Out of Stock"
            order_btn.disabled = True
            order_btn.variant = "warning"

        self.query_one("#input-order-qty").validators = [
            Number(minimum=1, maximum=max(stock_cnt, 1))
        ]
        self.query_one("#input-order-qty").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    async def on_input_changed(self, message: Input.Changed) -> None:
        if (
            message.input.id == "input-order-qty"
            and message.input.is_valid
            and message.value
            and self.focused == message.input
        ):
            self.order_qty = int(message.value)

    def watch_order_qty(self, qty: int):
        self.query_one("#btn-sub-qty").disabled = qty <= 1
        self.query_one("#btn-add-qty").disabled = qty >= self._item.stock
        self.query_one("#input-order-qty", Input).value = str(qty)

    @on(Button.Pressed, "#btn-add-qty")
    def handle_add_qty(self):
        self.order_qty += 1

    @on(Button.Pressed, "#btn-sub-qty")
    def handle_sub_qty(self):
        self.order_qty -= 1

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)

    @on(Input.Submitted, "#input-order-qty")
    @on(Button.Pressed, "#btn-addcart")
    def handle_addcart(self):
        raw = self.query_one("#input-order-qty", Input).value
        status = add_item_to_cart(self.app.state.basket, self._item, raw)

        match status:
            case Status.OK:
                self.app.notify("Add to the cart successful!")
                self.dismiss(True)
            case Status.OUT_OF_STOCK:
                self.notify("This product is out of stock", severity="warning")
            case _:
                qty_input = self.query_one("#input-order-qty", Input)
                qty_input.add_class("-invalid")
                qty_input.focus()
                self.notify(
                    f"Enter a quantity between 1 and {self._item.stock}.",
                    severity="error",
                )
