# holds both inventories and builds the startup catalog
from __future__ import annotations

from dataclasses import dataclass, field

from catalog.inventory import Inventory
from catalog.models import CatalogItem, ItemKind
from utils.logger import get_logger

_logger = get_logger(__name__)

# (name, id, price, rate %, stock)
SEED_BASIC = [
    ("Book A", "P001", 50.0, 10.0, 20),
    ("Book B", "P002", 35.0, 5.0, 10),
    ("Notebook C", "P003", 15.0, 0.0, 30),
    ("Pen D", "P004", 5.0, 0.0, 100),
    ("Backpack X", "P005", 60.0, 0.0, 15),
    ("Water Bottle", "P006", 18.0, 5.0, 50),
    ("Desk Lamp", "P007", 80.0, 8.0, 0),
    ("Office Chair", "P008", 120.0, 12.0, 25),
]

# (name, id, price, rate %, stock, power W, warranty months, extra fee)
SEED_ELECTRONIC = [
    ("Phone X", "E001", 800.0, 15.0, 5, 20, 12, 50.0),
    ("Laptop Z", "E002", 1200.0, 10.0, 3, 65, 24, 80.0),
    ("Headphone H", "E003", 150.0, 0.0, 15, 5, 6, 10.0),
    ("Camera C", "E004", 500.0, 5.0, 7, 10, 12, 30.0),
    ("Tablet T", "E005", 600.0, 12.0, 8, 15, 18, 40.0),
    ("Smartwatch W", "E006", 200.0, 0.0, 20, 3, 6, 15.0),
    ("Speaker S", "E007", 120.0, 0.0, 10, 4, 12, 8.0),
    ("Console C", "E008", 400.0, 7.0, 0, 25, 24, 25.0),
]


@dataclass
class Store:
    basic: Inventory = field(default_factory=lambda: Inventory(ItemKind.BASIC))
    electronic: Inventory = field(
        default_factory=lambda: Inventory(ItemKind.ELECTRONIC)
    )

    def inventory_for(self, kind: ItemKind) -> Inventory:
        return self.basic if kind == ItemKind.BASIC else self.electronic


def seeded_store() -> Store:
    """Fresh store filled with the startup catalog. Nothing survives the process."""
    store = Store(
        Inventory(ItemKind.BASIC, (CatalogItem.basic(*row) for row in SEED_BASIC)),
        Inventory(
            ItemKind.ELECTRONIC,
            (CatalogItem.electronic(*row) for row in SEED_ELECTRONIC),
        ),
    )
    _logger.debug(
        f"Seeded store with {len(store.basic)} basic and "
        f"{len(store.electronic)} electronic items."
    )
    return store
