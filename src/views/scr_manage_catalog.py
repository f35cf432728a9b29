from __future__ import annotations

from typing import Dict

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.validation import Number
from textual.widgets import Button, DataTable, Input, Label, Select

from catalog.crud import add_product, list_items, parse_new_product, remove_product
from catalog.models import ItemKind, Status
from catalog.pricing import describe
from utils.messages import CatalogChangedMessage
from utils.pure import CATALOG_COLUMNS, catalog_rows, render_item_md
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal, ItemInfoModal

# input id suffix -> (label, placeholder, electronics only)
FORM_FIELDS = {
    "name": ("Name", "Book Z", False),
    "ident": ("ID", "P009", False),
    "price": ("Price", "25.0", False),
    "rate": ("Discount rate (%)", "leave blank for none", False),
    "stock": ("Amount", "10", False),
    "power": ("Power (W)", "20", True),
    "warranty": ("Warranty time (months)", "12", True),
    "extra_fee": ("Extra fee", "15.0", True),
}


class ManageCatalogScreen(BaseScreen):
    """
    Manager view: add a basic or electronic product, or remove one by name.
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with VerticalScroll():
            yield DataTable(id="table-catalog")
            with Vertical(id="vert-add-form"):
                yield Label("Choose type of product you want to add:")
                yield Select(
                    [
                        ("Product", ItemKind.BASIC),
                        ("Electronic Product", ItemKind.ELECTRONIC),
                    ],
                    value=ItemKind.BASIC,
                    allow_blank=False,
                    id="select-kind",
                )
                for key, (label, placeholder, electronic_only) in FORM_FIELDS.items():
                    with Horizontal(
                        id=f"row-{key}",
                        classes=(
                            "form-row electronic-only" if electronic_only else "form-row"
                        ),
                    ):
                        yield Label(f"{label}:")
                        yield Input(
                            placeholder=placeholder,
                            id=f"input-{key}",
                            type=self._input_type(key),
                            validators=self._validators(key),
                        )
                yield Button("Add product", id="btn-add", variant="success")
            with Horizontal(id="hort-remove"):
                yield Input(placeholder="Product name to remove", id="input-remove-name")
                yield Button("Remove product", id="btn-remove", variant="error")

    @staticmethod
    def _validators(key: str) -> list:
        return [] if key in ("name", "ident") else [Number(minimum=0)]

    @staticmethod
    def _input_type(key: str) -> str:
        if key in ("stock", "power", "warranty"):
            return "integer"
        if key in ("price", "rate", "extra_fee"):
            return "number"
        return "text"

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns(*CATALOG_COLUMNS)
        self.reload_catalog()
        self.toggle_electronic_fields(ItemKind.BASIC)
        self.query_one("#input-name", Input).focus()

    @on(CatalogChangedMessage)
    def reload_catalog(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        table.add_rows(catalog_rows(list_items(self.app.state.store)))

    @on(Select.Changed, "#select-kind")
    def handle_kind_changed(self, event: Select.Changed) -> None:
        self.toggle_electronic_fields(event.value)

    def toggle_electronic_fields(self, kind: ItemKind) -> None:
        for row in self.query(".electronic-only"):
            row.display = kind == ItemKind.ELECTRONIC

    def _form_values(self) -> Dict[str, str]:
        return {key: self.query_one(f"#input-{key}", Input).value for key in FORM_FIELDS}

    @on(Button.Pressed, "#btn-add")
    @work(exclusive=True)
    async def handle_add(self) -> None:
        kind = self.query_one("#select-kind", Select).value
        status, item = parse_new_product(kind, self._form_values())
        if status != Status.OK:
            self.notify("Check the product information and try again.", severity="error")
            return

        add_product(self.app.state.store, item)
        for key in FORM_FIELDS:
            self.query_one(f"#input-{key}", Input).value = ""
        self.post_message(CatalogChangedMessage())

        await self.app.push_screen_wait(
            ItemInfoModal("PRODUCT INFORMATION:", render_item_md(describe(item)))
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
                f"Remove {name} from the catalog?",
                primary_text="Yes",
                secondary_text="No",
                tone="error",
            )
        ):
            return

        if remove_product(self.app.state.store, name) == Status.OK:
            name_input.value = ""
            self.notify("Remove item successful!")
            self.post_message(CatalogChangedMessage())
        else:
            self.notify(f"No results found for {name}", severity="warning")
