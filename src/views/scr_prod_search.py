from typing import List

from textual import events, on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.events import ScreenResume
from textual.widgets import DataTable, Input, Label

from catalog.crud import find_item, list_items
from catalog.models import CatalogItem
from utils.messages import CartChangedMessage
from utils.pure import CATALOG_COLUMNS, catalog_rows
from views.base_screen import BaseScreen
from views.modal_prod_detail import ProdDetailModal


class ProdSearchScreen(BaseScreen):
    """
    prod search, for customers only.
    Exact-name lookup on top, whole catalog below.
    """

    # bindings here are only displayed in footer
    BINDINGS = [
        Binding("fn+shift+1", "noop", "View Product", show=True, key_display="⏎"),
        Binding("escape", "noop", "Exit Prod View", show=True),
    ]

    def __init__(self):
        super().__init__()
        self._items: List[CatalogItem] = []

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Label("Enter product you want to buy:")
        yield Input(id="input-search", placeholder="Exact product name, e.g. Book A")
        yield DataTable(id="table-catalog")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns(*CATALOG_COLUMNS)

        self.reload_catalog()
        self.query_one("#input-search").focus()

    @on(ScreenResume)
    def reload_catalog(self) -> None:
        table = self.query_one(DataTable)
        if not table.columns:
            return
        self._items = list_items(self.app.state.store)
        table.clear()
        table.add_rows(catalog_rows(self._items))

    @on(Input.Submitted, "#input-search")
    def handle_search(self, message: Input.Submitted) -> None:
        name = message.value
        item = find_item(self.app.state.store, name)
        if item is None:
            self.notify(f"No results found for {name}", severity="warning")
            return
        self.open_detail(item)

    async def on_key(self, event: events.Key) -> None:
        table = self.query_one(DataTable)
        if event.key == "enter" and self.focused == table and self._items:
            self.open_detail(self._items[table.cursor_row])

    @work(exclusive=True)
    async def open_detail(self, item: CatalogItem) -> None:
        if await self.app.push_screen_wait(ProdDetailModal(item)):
            self.app.post_message(CartChangedMessage())
