"""
Table Order Store with Concurrency Control

Thread-safe in-memory storage of the items ordered at each table.

Every registered table owns its own lock and its own list of ordered
menu item ids. Adding, removing and reading on one table only takes that
table's lock, so requests for different tables never wait on each other.
The menu catalog and table registry are immutable and read without locks.

Readers always get copies taken under the lock, never the live list.

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from threading import Lock

from app.exceptions import ItemNotOrdered, UnknownMenuItem, UnknownTable
from app.models import MenuItem, OrderedItem, Table
from app.services.catalog import MenuCatalog, TableRegistry

logger = logging.getLogger(__name__)


class TableOrders:
    """Ordered items of one table, guarded by the table's own lock."""

    __slots__ = ("table_id", "lock", "item_ids")

    def __init__(self, table_id: int):
        self.table_id = table_id
        self.lock = Lock()
        # duplicates allowed, insertion order kept
        self.item_ids: list[int] = []


class TableOrderStore:
    """
    Concurrent store of table orders.

    Operations on the same table are totally ordered by the order in which
    they acquire that table's lock. Operations on different tables are
    independent.

    Example:
        >>> store = TableOrderStore(build_menu_catalog(), build_table_registry())
        >>> ordered = store.add_item(1, 1)
        >>> [item.name for item in store.list_items(1)]
        ['Salad']
    """

    def __init__(self, catalog: MenuCatalog, registry: TableRegistry):
        self.catalog = catalog
        self.registry = registry

        # one slot per table, created up front and never replaced
        self._orders: dict[int, TableOrders] = {
            table.id: TableOrders(table.id) for table in registry
        }

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _table(self, table_id: int) -> TableOrders:
        orders = self._orders.get(table_id)
        if orders is None:
            logger.info(f"Rejected: unknown table {table_id}")
            raise UnknownTable(table_id)
        return orders

    def _menu_item(self, item_id: int) -> MenuItem:
        item = self.catalog.get(item_id)
        if item is None:
            logger.info(f"Rejected: unknown menu item {item_id}")
            raise UnknownMenuItem(item_id)
        return item

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_item(self, table_id: int, item_id: int) -> OrderedItem:
        """
        Order one more occurrence of a menu item at a table.

        Raises:
            UnknownTable: table_id is not registered
            UnknownMenuItem: item_id is not on the menu
        """
        orders = self._table(table_id)
        item = self._menu_item(item_id)

        with orders.lock:
            orders.item_ids.append(item_id)
            count = len(orders.item_ids)

        logger.debug(f"Table {table_id}: added item {item_id} ({count} items)")
        return OrderedItem(table_id=table_id, item=item)

    def remove_item(self, table_id: int, item_id: int) -> None:
        """
        Remove exactly one occurrence of a menu item from a table.

        When the item was ordered several times, the earliest occurrence
        is removed.

        Raises:
            UnknownTable: table_id is not registered
            UnknownMenuItem: item_id is not on the menu
            ItemNotOrdered: no occurrence of item_id is on the table
        """
        orders = self._table(table_id)
        self._menu_item(item_id)

        with orders.lock:
            try:
                orders.item_ids.remove(item_id)
            except ValueError:
                not_ordered = True
            else:
                not_ordered = False
            count = len(orders.item_ids)

        if not_ordered:
            logger.info(f"Rejected: item {item_id} not ordered at table {table_id}")
            raise ItemNotOrdered(table_id, item_id)

        logger.debug(f"Table {table_id}: removed item {item_id} ({count} items)")

    # =========================================================================
    # READS
    # =========================================================================

    def list_items(self, table_id: int) -> list[MenuItem]:
        """Snapshot of every item currently ordered at a table."""
        orders = self._table(table_id)

        with orders.lock:
            item_ids = list(orders.item_ids)

        return [self.catalog.get(item_id) for item_id in item_ids]

    def get_item(self, table_id: int, item_id: int) -> MenuItem:
        """
        Look up a menu item that is currently ordered at a table.

        Raises:
            UnknownTable: table_id is not registered
            ItemNotOrdered: the item is not on the table right now
        """
        orders = self._table(table_id)

        with orders.lock:
            present = item_id in orders.item_ids

        if not present:
            raise ItemNotOrdered(table_id, item_id)

        return self.catalog.get(item_id)

    def count_items(self, table_id: int) -> int:
        """Number of occurrences currently ordered at a table."""
        orders = self._table(table_id)

        with orders.lock:
            return len(orders.item_ids)

    def list_tables(self) -> tuple[Table, ...]:
        return self.registry.tables()

    def list_menu(self) -> tuple[MenuItem, ...]:
        return self.catalog.items()
