"""
Services Module

Contains the restaurant business logic and the order store factory.

Services:
    - catalog: Menu catalog and table registry builders
    - order_store: Thread-safe per-table order storage

Usage:
    from app.services import get_order_store

    # Built once from settings, shared by every request
    store = get_order_store()
    store.add_item(table_id=1, item_id=3)
"""

import logging
from functools import lru_cache

from app.core.config import get_settings
from app.services.catalog import (
    MENU_ITEM_NAMES,
    MenuCatalog,
    TableRegistry,
    build_menu_catalog,
    build_table_registry,
)
from app.services.order_store import TableOrderStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_order_store() -> TableOrderStore:
    """
    Get the application-wide order store.

    The menu catalog and table registry are built here, once, from the
    current settings and handed to the store as read-only references.
    The instance is cached so every request sees the same orders.

    Returns:
        TableOrderStore: Shared order store instance
    """
    settings = get_settings()

    catalog = build_menu_catalog(
        seed=settings.menu_seed,
        min_minutes=settings.cooking_time_min,
        max_minutes=settings.cooking_time_max,
    )
    registry = build_table_registry(settings.table_count)

    logger.info(
        f"Order store ready: {len(registry)} tables, {len(catalog)} menu items"
    )
    return TableOrderStore(catalog, registry)


def reset_order_store() -> None:
    """
    Clear the cached order store instance.

    The next call to get_order_store() builds a new, empty store.
    """
    get_order_store.cache_clear()
    logger.debug("Order store cache cleared")


__all__ = [
    "get_order_store",
    "reset_order_store",
    "MENU_ITEM_NAMES",
    "MenuCatalog",
    "TableRegistry",
    "TableOrderStore",
    "build_menu_catalog",
    "build_table_registry",
]
