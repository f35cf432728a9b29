from typing import Literal, Optional

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label

from catalog.crud import resolve_role
from views.base_screen import BaseScreen
from views.modal_dialog import QuitDialogModal


class RoleScreen(BaseScreen):
    """
    Role prompt. Dismisses with "customer" or "manager",
    or None when the answer is neither 1 nor 2 (the app then exits).
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Choose your role", show_sidebar=False)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-role"):
            yield Label("Choose your role:")
            yield Label("1. Customer")
            yield Label("2. Manager")
            yield Input(placeholder="1", id="input-role")
            with Horizontal(id="div-role-btns"):
                yield Button("Quit", id="btn-quit")
                yield Button("Choose", id="btn-choose", variant="primary")

    def on_mount(self):
        self.query_one("#input-role").focus()

    @on(Input.Submitted, "#input-role")
    @on(Button.Pressed, "#btn-choose")
    def handle_choose(self) -> None:
        raw = self.query_one("#input-role", Input).value
        role: Optional[Literal["customer", "manager"]] = resolve_role(raw)
        if role:
            self.notify(f"Welcome, {role}!")
        self.dismiss(role)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self) -> None:
        self.app.push_screen(QuitDialogModal())
