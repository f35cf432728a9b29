from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class RoleSwitchRequestedMessage(Message):
    """
    broadcasted when the user leaves the current role,
    the app goes back to the role prompt with a fresh session
    """

    bubble = True


class CartChangedMessage(Message):
    """
    Fired when a line is added to or removed from either cart.
    Post at App level when fired from outside CartScreen.
    """

    bubble = True


class CatalogChangedMessage(Message):
    """
    Fired by the manager screen after adding or removing a product,
    so catalog tables can reload.
    """

    bubble = True


class ModeSwitchedMessage(Message):
    """
    fired whenever switch_mode is called
    must be fired from app level
    """

    bubble = True

    def __init__(self, old_mode: str, new_mode: str) -> None:
        super().__init__()
        self.old_mode = old_mode
        self.new_mode = new_mode
