"""Menu service: the public boundary of the menu item store."""

import logging
from decimal import Decimal
from typing import NoReturn

from cafe_menu_service.models.menu_models import Category, MenuItem, MenuItemRequest, Size
from cafe_menu_service.observability import traced
from cafe_menu_service.observability.metrics import (
    record_menu_item_not_found,
    record_menu_item_operation,
    record_stored_items_change,
)
from cafe_menu_service.repositories.menu_repository import MenuItemRepository

logger = logging.getLogger(__name__)

DEMO_MENU_ITEMS: list[MenuItemRequest] = [
    MenuItemRequest(
        name="Latte",
        price=Decimal("3.50"),
        description="Espresso with steamed milk",
        category=Category.COFFEE,
        size=Size.MEDIUM,
        available=True,
    ),
    MenuItemRequest(
        name="Green Tea",
        price=Decimal("2.50"),
        description="Hot Japanese green tea",
        category=Category.TEA,
        size=Size.SMALL,
        available=True,
    ),
]


class MenuItemNotFoundError(Exception):
    """Raised when a referenced menu item id is not present in the store."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Menu item with id={item_id} not found")


class MenuService:
    """Service for managing the café menu.

    Wraps the repository so that a missing id surfaces as a single typed
    error, MenuItemNotFoundError, which the HTTP layer maps to a 404.
    """

    def __init__(self, repository: MenuItemRepository) -> None:
        """Initialize the MenuService.

        Args:
            repository: Repository holding the menu items
        """
        self.repository = repository

    def seed_demo_items(self) -> list[MenuItem]:
        """Insert the demo menu items.

        Returns:
            list: The seeded items, in insertion order
        """
        seeded = [self.create_item(request) for request in DEMO_MENU_ITEMS]
        logger.info(f"Seeded {len(seeded)} demo menu items")
        return seeded

    @traced("menu_item.list")
    def list_items(
        self,
        category: Category | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        available: bool | None = None,
    ) -> list[MenuItem]:
        """List menu items, optionally filtered.

        Args:
            category: Only items in this category
            min_price: Only items priced at or above this amount
            max_price: Only items priced at or below this amount
            available: Only items with this availability

        Returns:
            list: Matching items ordered by ascending id
        """
        return self.repository.get_all(
            category=category,
            min_price=min_price,
            max_price=max_price,
            available=available,
        )

    @traced("menu_item.get")
    def get_item(self, item_id: int) -> MenuItem:
        """Get a menu item by id.

        Raises:
            MenuItemNotFoundError: If the id is not present
        """
        item = self.repository.get_by_id(item_id)
        if item is None:
            self._not_found("get", item_id)
        return item

    @traced("menu_item.create")
    def create_item(self, request: MenuItemRequest) -> MenuItem:
        """Create a menu item with the next available id."""
        item = self.repository.create(request)

        record_menu_item_operation("create")
        record_stored_items_change(1)
        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("menu_item.update")
    def update_item(self, item_id: int, request: MenuItemRequest) -> MenuItem:
        """Replace every field of a menu item except its id.

        Args:
            item_id: Menu item identifier
            request: Replacement fields

        Returns:
            MenuItem: The updated item

        Raises:
            MenuItemNotFoundError: If the id is not present
        """
        updated = self.repository.update(item_id, request)
        if updated is None:
            self._not_found("update", item_id)

        record_menu_item_operation("update")
        logger.info(f"Updated menu item {item_id}")
        return updated

    @traced("menu_item.delete")
    def delete_item(self, item_id: int) -> None:
        """Delete a menu item permanently.

        Raises:
            MenuItemNotFoundError: If the id is not present
        """
        if not self.repository.delete(item_id):
            self._not_found("delete", item_id)

        record_menu_item_operation("delete")
        record_stored_items_change(-1)
        logger.info(f"Deleted menu item {item_id}")

    def count_items(self) -> int:
        """Return the number of menu items currently stored."""
        return self.repository.count()

    def _not_found(self, operation: str, item_id: int) -> NoReturn:
        record_menu_item_not_found(operation)
        logger.warning(f"Menu item {item_id} not found during {operation}")
        raise MenuItemNotFoundError(item_id)
