from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from utils.logger import get_logger
from utils.messages import (
    ModeSwitchedMessage,
    QuitRequestedMessage,
    RoleSwitchRequestedMessage,
)
from utils.state import GlobalState
from views.scr_cart import CartScreen
from views.scr_manage_catalog import ManageCatalogScreen
from views.scr_prod_search import ProdSearchScreen
from views.scr_role import RoleScreen

_logger = get_logger(__name__)

INVALID_ROLE_MESSAGE = "Invalid"


class ShopSimApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    MODES = {
        "prod_search": ProdSearchScreen,
        "cart": CartScreen,
        "mgr_catalog": ManageCatalogScreen,
    }

    CUSTOMER_MODES = {"prod_search": "Search Products", "cart": "Cart"}
    MANAGER_MODES = {"mgr_catalog": "Manage Catalog"}

    CSS_PATH = [
        "styles/index.tcss",
        "styles/role.tcss",
        "styles/search.tcss",
        "styles/cart.tcss",
        "styles/manage.tcss",
    ]

    state: GlobalState

    def __init__(self, state: GlobalState | None = None):
        super().__init__()
        self.state = state or GlobalState()

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        self.main_flow()

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(RoleSwitchRequestedMessage)
    def handle_role_switch(self):
        self.state.end_session()
        self.notify("Session closed.")
        self.main_flow()

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.state.end_session()
        self.exit()

    @work
    async def main_flow(self):
        role = await self.push_screen_wait(RoleScreen())
        if role is None:
            _logger.info("Invalid role choice, exiting.")
            self.exit(return_code=0, message=INVALID_ROLE_MESSAGE)
            return

        self.state.start_session(role)
        if role == "customer":
            self.post_message(ModeSwitchedMessage(self.current_mode, "prod_search"))
            await self.switch_mode("prod_search")
        else:
            self.post_message(ModeSwitchedMessage(self.current_mode, "mgr_catalog"))
            await self.switch_mode("mgr_catalog")


def run() -> None:
    ShopSimApp().run()


if __name__ == "__main__":
    run()
