from textual import events, on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, MarkdownViewer

from catalog.crud import checkout
from utils.logger import get_logger
from utils.pure import render_cart_md, render_receipt, render_skipped
from views.modal_dialog import DialogModal

_logger = get_logger(__name__)


class CheckoutModal(ModalScreen[bool]):
    """
    Order summary with a confirm button.
    Placing the order ends the session and prints the receipt on exit;
    going back dismisses with False.
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield MarkdownViewer("", show_table_of_contents=False)
            with Horizontal():
                yield Button("Go Back", id="btn-quit")
                yield Button("Place Order", id="btn-submit", variant="primary")

    async def on_mount(self):
        basket = self.app.state.basket
        md = "### Order Summary\n\n" + render_cart_md(basket.lines(), basket.total())
        await self.query_one(MarkdownViewer).document.update(md)
        self.query_one("#btn-submit").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    @on(Button.Pressed, "#btn-submit")
    @work(exclusive=True)
    async def handle_submit(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Place order? This cannot be undone.",
                primary_text="Yes",
                secondary_text="No",
                tone="positive",
            )
        ):
            self.dismiss(False)
            return

        order = checkout(self.app.state.store, self.app.state.basket)
        summary = order.summary()
        skipped = render_skipped(order.failed_lines())
        receipt = render_receipt(
            summary.lines,
            summary.total,
            order.charged_total() if skipped else None,
        )
        if skipped:
            receipt += "\n\nNot ordered:\n" + "\n".join(f"- {s}" for s in skipped)

        _logger.info(f"Order placed, total {summary.total:.2f}.")
        self.app.exit(result=receipt, message=receipt)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)
