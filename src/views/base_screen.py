from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, ListItem, ListView, Markdown

from utils.messages import ModeSwitchedMessage, RoleSwitchRequestedMessage
from utils.pure import format_amount, generate_markdown_table
from views.modal_dialog import DialogModal, QuitDialogModal


class Sidebar(Container):
    init_mode = ""

    def compose(self) -> ComposeResult:
        yield Label("Session", id="label-info-1")
        yield Markdown("", id="md-session")
        yield Button("Switch role", id="btn-switch-role", variant="error")
        yield Label("Menu", id="label-info-2")
        yield ListView(id="list-menu")

    async def on_mount(self):
        self.init_mode = self.app.current_mode

        state = self.app.state
        if not state.role:
            return

        modes = (
            self.app.CUSTOMER_MODES
            if state.role == "customer"
            else self.app.MANAGER_MODES
        )
        list_menu: ListView = self.query_one("#list-menu")
        await list_menu.clear()
        await list_menu.extend(
            [ListItem(Label(v), id="list-menu-item-" + k) for k, v in modes.items()]
        )
        await self.refresh_session_info()
        self.highlight_item(self.init_mode)

    async def refresh_session_info(self):
        state = self.app.state
        rows = [["Role", (state.role or "-").capitalize()]]
        if state.role == "customer":
            rows.append(["Cart lines", len(state.basket.lines())])
            rows.append(["Cart total", format_amount(state.basket.total())])
        else:
            rows.append(["Basic items", len(state.store.basic)])
            rows.append(["Electronics", len(state.store.electronic)])
        await self.query_one("#md-session", Markdown).update(
            generate_markdown_table(None, rows, ["l", "l"])
        )

    async def on_list_view_selected(self, event: ListView.Selected):
        selected_mode = event.item.id.removeprefix("list-menu-item-")
        self.highlight_item(self.init_mode)
        if self.app.current_mode != selected_mode:
            self.post_message(ModeSwitchedMessage(self.app.current_mode, selected_mode))
            await self.app.switch_mode(selected_mode)

    @on(Button.Pressed, "#btn-switch-role")
    @work
    async def handle_switch_role(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Leave this role? Unordered cart lines are dropped.",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        ):
            return

        self.post_message(RoleSwitchRequestedMessage())

    def highlight_item(self, mode_str: str):
        for item in self.query_one("#list-menu").children:
            item.highlighted = mode_str in item.id


class BaseScreen(Screen):
    """
    Inherited by all screens, contains common elements like
    headers, footers, sidebar, and keybindings.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
    ]

    def __init__(self):
        super().__init__()

        self.configure()

    def configure(
        self,
        header_sub_title: str = "Shop",
        show_sidebar: bool = True,
    ) -> None:
        """
        configure behavior of the base screen
        """
        self.app.title = "Shop Simulator"
        self.sub_title = header_sub_title
        for k, v in self.app.MODES.items():
            if isinstance(self, v):
                if k in self.app.MANAGER_MODES:
                    self.sub_title = self.app.MANAGER_MODES[k]
                elif k in self.app.CUSTOMER_MODES:
                    self.sub_title = self.app.CUSTOMER_MODES[k]

        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    async def on_screen_resume(self) -> None:
        # cart and catalog may have changed while another screen was on top
        for sidebar in self.query(Sidebar):
            await sidebar.refresh_session_info()

    def action_noop(self) -> None:
        pass

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
