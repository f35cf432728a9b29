from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from catalog.models import CatalogItem, ItemKind
from utils.logger import get_logger

_logger = get_logger(__name__)


class Inventory:
    """
    Authoritative stock list for one item kind.

    Items are kept in insertion order and looked up by exact name with a
    linear scan. Duplicate names are accepted, but only the first one is
    reachable through `find`.
    """

    def __init__(self, kind: ItemKind, items: Iterable[CatalogItem] = ()) -> None:
        self.kind = kind
        self._items: List[CatalogItem] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(tuple(self._items))

    @property
    def items(self) -> Tuple[CatalogItem, ...]:
        return tuple(self._items)

    def add(self, item: CatalogItem) -> None:
        self._items.append(item)
        _logger.debug(f"Added '{item.name}' to {self.kind} inventory.")

    def find(self, name: str) -> Optional[int]:
        """Index of the first item called `name`, or None."""
        for idx, item in enumerate(self._items):
            if item.name == name:
                return idx
        return None

    def index_of(self, item: CatalogItem) -> Optional[int]:
        """Index of this exact object, or None once it has been removed."""
        return next((i for i, it in enumerate(self._items) if it is item), None)

    def get(self, index: int) -> CatalogItem:
        return self._items[index]

    def remove(self, name: str) -> bool:
        """Remove the first item called `name`. Returns False if none matched."""
        idx = self.find(name)
        if idx is None:
            _logger.info(f"No {self.kind} item named '{name}' to remove.")
            return False
        del self._items[idx]
        _logger.info(f"Removed '{name}' from {self.kind} inventory.")
        return True
