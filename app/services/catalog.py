"""
Menu Catalog and Table Registry

Both are built exactly once at startup and are read-only afterwards.
Cooking times are drawn from a dedicated ``random.Random`` instance so
a seed reproduces the same menu and nothing else touches that state.

Author: Khalil_Bannouri
Version: 1.0.0
"""

import random
import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from app.core.config import MAX_TABLES
from app.models import MenuItem, Table

logger = logging.getLogger(__name__)


MENU_ITEM_NAMES = (
    "Salad",
    "Soup",
    "Sandwich",
    "Pasta",
    "Steak",
    "Burger",
    "Pizza",
    "Tacos",
    "Fries",
    "Stir Fry",
    "Omelette",
    "Pancakes",
    "Sushi",
    "Curry",
    "Fish & Chips",
    "Fried Rice",
    "Ramen",
    "Burrito",
    "Waffles",
    "Salmon",
)


class MenuCatalog:
    """Read-only mapping from menu item id to MenuItem."""

    def __init__(self, items: Iterable[MenuItem]):
        by_id = {}
        for item in items:
            if item.id in by_id:
                raise ValueError(f"duplicate menu item id: {item.id}")
            by_id[item.id] = item

        self._by_id = MappingProxyType(by_id)
        self._items = tuple(by_id.values())

    def get(self, item_id: int) -> Optional[MenuItem]:
        return self._by_id.get(item_id)

    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)


class TableRegistry:
    """Read-only set of table identities."""

    def __init__(self, table_ids: Iterable[int]):
        self._tables = tuple(Table(id=table_id) for table_id in sorted(set(table_ids)))
        self._ids = frozenset(table.id for table in self._tables)

    def tables(self) -> tuple[Table, ...]:
        return self._tables

    def __contains__(self, table_id: object) -> bool:
        return table_id in self._ids

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables)


def build_menu_catalog(
    names: Iterable[str] = MENU_ITEM_NAMES,
    seed: Optional[int] = None,
    min_minutes: int = 5,
    max_minutes: int = 15,
) -> MenuCatalog:
    """
    Build the menu with randomized cooking times.

    Ids are assigned 1..N in the order of ``names``. Each cooking time is
    drawn uniformly from [min_minutes, max_minutes].

    Args:
        names: Dish names, in id order
        seed: Seed for reproducible cooking times
        min_minutes: Shortest cooking time
        max_minutes: Longest cooking time

    Returns:
        MenuCatalog: The frozen catalog
    """
    if min_minutes > max_minutes:
        raise ValueError(f"invalid cooking time range: {min_minutes}-{max_minutes}")

    rng = random.Random(seed)
    catalog = MenuCatalog(
        MenuItem(id=item_id, name=name, cooking_time=rng.randint(min_minutes, max_minutes))
        for item_id, name in enumerate(names, start=1)
    )

    logger.info(f"Menu catalog built: {len(catalog)} items (seed={seed})")
    return catalog


def build_table_registry(count: int = MAX_TABLES) -> TableRegistry:
    """Register tables 1..count (at most 100)."""
    if not 1 <= count <= MAX_TABLES:
        raise ValueError(f"table count must be between 1 and {MAX_TABLES}, got {count}")

    registry = TableRegistry(range(1, count + 1))

    logger.info(f"Table registry built: {len(registry)} tables")
    return registry
