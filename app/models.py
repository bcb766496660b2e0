"""
Restaurant Domain Models

Immutable value objects shared by the catalog, the order store and the
API layer. Menu items and tables never change after startup, so they are
frozen dataclasses and can be handed out without copying.

Author: Khalil_Bannouri
Version: 1.0.0
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class MenuItem:
    """
    A dish on the menu.

    Attributes:
        id: Menu item identifier (>= 1, unique within the catalog)
        name: Display name
        cooking_time: Cooking time in minutes, fixed when the catalog is built
    """
    id: int
    name: str
    cooking_time: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class Table:
    """A table that can hold ordered items."""
    id: int


@dataclass(frozen=True)
class OrderedItem:
    """
    One occurrence of a menu item on a table.

    Returned by the order store when an item is added. It has no
    quantity or timestamp: ordering the same dish twice gives two
    separate occurrences.
    """
    table_id: int
    item: MenuItem
