from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import ScreenResume
from textual.widgets import Button, Input, Label, Markdown, Rule, Select

from catalog.crud import compare_in_cart, remove_from_cart
from catalog.models import ItemKind, Status
from utils.messages import CartChangedMessage
from utils.pure import comparison_sentence, format_amount, render_cart_md
from views.base_screen import BaseScreen
from views.modal_checkout import CheckoutModal
from views.modal_dialog import DialogModal


class CartScreen(BaseScreen):
    """
    Both carts with subtotals and total, plus the cart actions:
    order, add more, remove by name, compare two items of one kind.
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with VerticalScroll(id="vertscroll-content"):
            yield Markdown("", id="md-cart")
        yield Label("Total: 0", id="label-cart-total")
        yield Rule(line_style="dashed")
        with Horizontal(id="hort-remove"):
            yield Input(placeholder="Product name to remove", id="input-remove-name")
            yield Button("Remove", id="btn-remove", variant="warning")
        with Vertical(id="vert-compare"):
            with Horizontal():
                yield Select(
                    [("Product", ItemKind.BASIC), ("Electronics", ItemKind.ELECTRONIC)],
                    value=ItemKind.BASIC,
                    allow_blank=False,
                    id="select-compare-kind",
                )
                yield Input(placeholder="First product's name", id="input-cmp-first")
                yield Input(placeholder="Second product's name", id="input-cmp-second")
                yield Button("Compare", id="btn-compare")
            yield Label("", id="label-compare-result")
        with Horizontal(id="hort-buttons"):
            yield Button("Add product", id="btn-add-more")
            yield Button("Order product", id="btn-checkout", variant="primary")

    async def on_mount(self):
        self.handle_cart_change()

    @on(CartChangedMessage)
    @on(ScreenResume)
    @work(exclusive=True)
    async def handle_cart_change(self):
        basket = self.app.state.basket
        await self.query_one("#md-cart", Markdown).update(
            render_cart_md(basket.lines(), basket.total())
        )
        self.query_one("#label-cart-total", Label).update(
            f"Total: {format_amount(basket.total())}"
        )

    @on(Input.Submitted, "#input-remove-name")
    @on(Button.Pressed, "#btn-remove")
    @work(exclusive=True)
    async def handle_remove(self) -> None:
        name_input = self.query_one("#input-remove-name", Input)
        name = name_input.value
        if not name:
            name_input.focus()
            return

        if not await self.app.push_screen_wait(
            DialogModal(
                f"Remove {name} from the cart?",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        ):
            return

        if remove_from_cart(self.app.state.basket, name) == Status.OK:
            name_input.value = ""
            self.notify("Remove successful!")
            self.post_message(CartChangedMessage())
        else:
            self.notify(f"No results found for {name}", severity="warning")

    @on(Button.Pressed, "#btn-compare")
    def handle_compare(self) -> None:
        kind = self.query_one("#select-compare-kind", Select).value
        first = self.query_one("#input-cmp-first", Input).value
        second = self.query_one("#input-cmp-second", Input).value
        result_label = self.query_one("#label-compare-result", Label)

        status, result = compare_in_cart(self.app.state.basket, kind, first, second)
        match status:
            case Status.OK:
                result_label.update(comparison_sentence(first, second, result))
            case Status.INVALID_INPUT:
                result_label.update("")
                self.notify(
                    "The second product's name duplicates the first one.",
                    severity="error",
                )
            case _:
                result_label.update("")
                self.notify(
                    f"No results found for {first} or {second}", severity="warning"
                )

    @on(Button.Pressed, "#btn-add-more")
    async def handle_add_more(self) -> None:
        await self.app.switch_mode("prod_search")

    @on(Button.Pressed, "#btn-checkout")
    @work(exclusive=True)
    async def handle_checkout(self) -> None:
        if self.app.state.basket.is_empty():
            self.app.notify("Cart is empty.", severity="warning")
            return

        await self.app.push_screen_wait(CheckoutModal())
        self.post_message(CartChangedMessage())
