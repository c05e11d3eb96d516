"""In-memory repository for menu items.

The repository owns the id sequence and the id-to-item mapping. Following the
pattern of the other repositories in this codebase, expected misses are
reported with simple return values (None/False) rather than exceptions.
"""

import itertools
import logging
import threading
from decimal import Decimal

from cafe_menu_service.models.menu_models import Category, MenuItem, MenuItemRequest

logger = logging.getLogger(__name__)


class MenuItemRepository:
    """Thread-safe in-memory store of menu items.

    Ids start at 1 and are never reused, even after deletion. Every public
    method holds the lock for exactly one logical operation.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._items: dict[int, MenuItem] = {}
        self._id_sequence = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, request: MenuItemRequest) -> MenuItem:
        """Allocate the next id and store a new menu item.

        Args:
            request: Payload describing the new item

        Returns:
            MenuItem: The stored item
        """
        with self._lock:
            item = MenuItem.from_request(next(self._id_sequence), request)
            self._items[item.id] = item

        logger.debug(f"Stored menu item {item.id}")
        return item

    def get_by_id(self, item_id: int) -> MenuItem | None:
        """Retrieve a menu item.

        Args:
            item_id: Menu item identifier

        Returns:
            MenuItem if found, None otherwise
        """
        with self._lock:
            return self._items.get(item_id)

    def update(self, item_id: int, request: MenuItemRequest) -> MenuItem | None:
        """Replace every field of an existing menu item, keeping its id.

        Args:
            item_id: Menu item identifier
            request: Payload with the replacement fields

        Returns:
            MenuItem: The new item if the id existed, None otherwise
        """
        with self._lock:
            if item_id not in self._items:
                return None

            updated = MenuItem.from_request(item_id, request)
            self._items[item_id] = updated

        return updated

    def delete(self, item_id: int) -> bool:
        """Delete a menu item.

        Args:
            item_id: Menu item identifier

        Returns:
            bool: True if an item was removed, False if the id was absent
        """
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def get_all(
        self,
        category: Category | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        available: bool | None = None,
    ) -> list[MenuItem]:
        """List menu items matching every supplied filter.

        A filter left as None places no constraint on the result.

        Args:
            category: Only items in this category
            min_price: Only items priced at or above this amount
            max_price: Only items priced at or below this amount
            available: Only items with this availability

        Returns:
            list: Matching items ordered by ascending id
        """
        with self._lock:
            snapshot = list(self._items.values())

        return sorted(
            (
                item
                for item in snapshot
                if (category is None or item.category == category)
                and (min_price is None or item.price >= min_price)
                and (max_price is None or item.price <= max_price)
                and (available is None or item.available == available)
            ),
            key=lambda item: item.id,
        )

    def count(self) -> int:
        """Return the number of stored menu items."""
        with self._lock:
            return len(self._items)
