"""
Restaurant Domain Exceptions

Expected, recoverable failures raised by the order store. None of them
means the store is in a bad state; the caller decides whether to show
the message to a user or treat it as a programming error.

Each exception carries the HTTP status the API layer responds with.

Author: Khalil_Bannouri
Version: 1.0.0
"""


class RestaurantError(Exception):
    """Base class for all order store failures."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownTable(RestaurantError):
    """The table id is not part of the table registry."""

    status_code = 404

    def __init__(self, table_id: int):
        self.table_id = table_id
        super().__init__(f"Table not found for table id:{table_id}")


class UnknownMenuItem(RestaurantError):
    """The menu item id is not part of the menu catalog."""

    status_code = 404

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Menu item not found for menu id: {item_id}")


class ItemNotOrdered(RestaurantError):
    """The menu item has no occurrence on the table right now."""

    status_code = 404

    def __init__(self, table_id: int, item_id: int):
        self.table_id = table_id
        self.item_id = item_id
        super().__init__(
            f"No Menu item with menu item id:{item_id}, "
            f"is found for Table with table id:{table_id}"
        )


__all__ = [
    "RestaurantError",
    "UnknownTable",
    "UnknownMenuItem",
    "ItemNotOrdered",
]
