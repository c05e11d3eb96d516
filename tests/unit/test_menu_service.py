"""Unit tests for MenuService."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from cafe_menu_service.models.menu_models import Category, MenuItem, MenuItemRequest, Size
from cafe_menu_service.repositories.menu_repository import MenuItemRepository
from cafe_menu_service.services.menu_service import (
    DEMO_MENU_ITEMS,
    MenuItemNotFoundError,
    MenuService,
)


@pytest.mark.unit
class TestMenuServiceWithMockRepository:
    """Test suite for MenuService against a mocked repository."""

    @pytest.fixture
    def mock_repository(self) -> MagicMock:
        """Create a mock MenuItemRepository."""
        return MagicMock(spec=MenuItemRepository)

    @pytest.fixture
    def menu_service(self, mock_repository: MagicMock) -> MenuService:
        """Create a MenuService with a mocked repository."""
        return MenuService(repository=mock_repository)

    @pytest.fixture
    def latte(self, latte_request: MenuItemRequest) -> MenuItem:
        """Create a stored latte."""
        return MenuItem.from_request(1, latte_request)

    def test_list_items_passes_filters(
        self, menu_service: MenuService, mock_repository: MagicMock, latte: MenuItem
    ) -> None:
        """Test that filters are forwarded to the repository untouched."""
        mock_repository.get_all.return_value = [latte]

        result = menu_service.list_items(
            category=Category.COFFEE, min_price=Decimal("3.00"), available=True
        )

        assert result == [latte]
        mock_repository.get_all.assert_called_once_with(
            category=Category.COFFEE,
            min_price=Decimal("3.00"),
            max_price=None,
            available=True,
        )

    def test_get_item_found(
        self, menu_service: MenuService, mock_repository: MagicMock, latte: MenuItem
    ) -> None:
        """Test getting an existing item."""
        mock_repository.get_by_id.return_value = latte

        assert menu_service.get_item(1) == latte
        mock_repository.get_by_id.assert_called_once_with(1)

    def test_get_item_not_found(
        self, menu_service: MenuService, mock_repository: MagicMock
    ) -> None:
        """Test that a repository miss becomes MenuItemNotFoundError."""
        mock_repository.get_by_id.return_value = None

        with pytest.raises(MenuItemNotFoundError) as exc_info:
            menu_service.get_item(99)

        assert exc_info.value.item_id == 99
        assert str(exc_info.value) == "Menu item with id=99 not found"

    def test_update_item_not_found(
        self, menu_service: MenuService, mock_repository: MagicMock, latte_request: MenuItemRequest
    ) -> None:
        """Test that updating a missing id raises."""
        mock_repository.update.return_value = None

        with pytest.raises(MenuItemNotFoundError):
            menu_service.update_item(3, latte_request)

    def test_delete_item_not_found(
        self, menu_service: MenuService, mock_repository: MagicMock
    ) -> None:
        """Test that deleting a missing id raises."""
        mock_repository.delete.return_value = False

        with pytest.raises(MenuItemNotFoundError):
            menu_service.delete_item(3)

    def test_count_items(self, menu_service: MenuService, mock_repository: MagicMock) -> None:
        """Test that count is delegated to the repository."""
        mock_repository.count.return_value = 4

        assert menu_service.count_items() == 4

    @patch("cafe_menu_service.services.menu_service.record_stored_items_change")
    @patch("cafe_menu_service.services.menu_service.record_menu_item_operation")
    def test_create_item_records_metrics(
        self,
        mock_record_operation: MagicMock,
        mock_record_change: MagicMock,
        menu_service: MenuService,
        mock_repository: MagicMock,
        latte_request: MenuItemRequest,
        latte: MenuItem,
    ) -> None:
        """Test that a create is counted and grows the stored item gauge."""
        mock_repository.create.return_value = latte

        assert menu_service.create_item(latte_request) == latte

        mock_record_operation.assert_called_once_with("create")
        mock_record_change.assert_called_once_with(1)

    @patch("cafe_menu_service.services.menu_service.record_menu_item_not_found")
    def test_miss_records_metric(
        self,
        mock_record_not_found: MagicMock,
        menu_service: MenuService,
        mock_repository: MagicMock,
    ) -> None:
        """Test that a miss is counted with its operation name."""
        mock_repository.delete.return_value = False

        with pytest.raises(MenuItemNotFoundError):
            menu_service.delete_item(8)

        mock_record_not_found.assert_called_once_with("delete")


@pytest.mark.unit
class TestMenuServiceWithRepository:
    """Test suite for MenuService against a real in-memory repository."""

    @pytest.fixture
    def menu_service(self) -> MenuService:
        """Create a MenuService over an empty repository."""
        return MenuService(repository=MenuItemRepository())

    def test_seed_demo_items(self, menu_service: MenuService) -> None:
        """Test that seeding inserts the latte and green tea as ids 1 and 2."""
        seeded = menu_service.seed_demo_items()

        assert [(item.id, item.name) for item in seeded] == [(1, "Latte"), (2, "Green Tea")]
        assert menu_service.count_items() == len(DEMO_MENU_ITEMS)
        assert menu_service.get_item(1).price == Decimal("3.50")
        assert menu_service.get_item(2).category == Category.TEA

    def test_create_then_get(
        self, menu_service: MenuService, latte_request: MenuItemRequest
    ) -> None:
        """Test that a created item is readable by its id."""
        created = menu_service.create_item(latte_request)

        assert menu_service.get_item(created.id) == created

    def test_update_then_get(
        self, menu_service: MenuService, latte_request: MenuItemRequest
    ) -> None:
        """Test that get reflects exactly the replacement fields."""
        created = menu_service.create_item(latte_request)
        replacement = MenuItemRequest(
            name="Latte Deluxe",
            price=Decimal("4.50"),
            category=Category.COFFEE,
            size=Size.LARGE,
        )

        updated = menu_service.update_item(created.id, replacement)

        assert updated == MenuItem.from_request(created.id, replacement)
        assert menu_service.get_item(created.id) == updated

    def test_delete_then_get_and_delete_again(
        self, menu_service: MenuService, latte_request: MenuItemRequest
    ) -> None:
        """Test that a deleted item is gone for both reads and deletes."""
        created = menu_service.create_item(latte_request)
        menu_service.delete_item(created.id)

        with pytest.raises(MenuItemNotFoundError):
            menu_service.get_item(created.id)
        with pytest.raises(MenuItemNotFoundError):
            menu_service.delete_item(created.id)

    def test_ids_strictly_increase(
        self, menu_service: MenuService, sample_requests: list[MenuItemRequest]
    ) -> None:
        """Test that every new id exceeds all earlier ones, across deletes."""
        seen: list[int] = []
        for request in sample_requests:
            item = menu_service.create_item(request)
            assert all(item.id > previous for previous in seen)
            seen.append(item.id)
            menu_service.delete_item(item.id)
