from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from catalog.cart import Basket
from catalog.store import Store, seeded_store
from utils.logger import get_logger

_logger = get_logger(__name__)


@dataclass
class GlobalState:
    """
    Centralized application state shared by screens.

    Fields:
      - role: "customer" | "manager" | None until the role prompt is answered
      - store: both inventories, seeded at startup and kept for the whole process
      - basket: the customer's basic and electronic carts
    """

    role: Optional[Literal["customer", "manager"]] = None
    store: Store = field(default_factory=seeded_store)
    basket: Basket = field(default_factory=Basket)

    def start_session(self, role: Literal["customer", "manager"]) -> None:
        self.role = role
        self.basket = Basket()
        _logger.info(f"Session started as {role}.")

    def end_session(self) -> None:
        """
        Drop the role and any unordered cart lines.
        The catalog is kept, including manager changes and stock decrements.
        """
        if self.role is None:
            return
        _logger.info(f"Session as {self.role} ended.")
        self.role = None
        self.basket = Basket()
