"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before src.main is imported so no application is built at import time
os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402

from cafe_menu_service.models.menu_models import Category, MenuItemRequest, Size  # noqa: E402


@pytest.fixture
def latte_request() -> MenuItemRequest:
    """Fixture providing the request for a medium latte."""
    return MenuItemRequest(
        name="Latte",
        price=Decimal("3.50"),
        description="Espresso with steamed milk",
        category=Category.COFFEE,
        size=Size.MEDIUM,
    )


@pytest.fixture
def mocha_payload() -> dict:
    """Fixture providing a JSON body for creating a mocha."""
    return {
        "name": "Mocha",
        "price": 4.00,
        "category": "COFFEE",
        "size": "MEDIUM",
    }


@pytest.fixture
def sample_requests() -> list[MenuItemRequest]:
    """Fixture providing a small mixed menu."""
    return [
        MenuItemRequest(
            name="Espresso",
            price=Decimal("2.00"),
            category=Category.COFFEE,
            size=Size.SMALL,
        ),
        MenuItemRequest(
            name="Flat White",
            price=Decimal("3.80"),
            category=Category.COFFEE,
            size=Size.MEDIUM,
        ),
        MenuItemRequest(
            name="Earl Grey",
            price=Decimal("2.20"),
            description="Black tea with bergamot",
            category=Category.TEA,
            size=Size.LARGE,
        ),
        MenuItemRequest(
            name="Croissant",
            price=Decimal("3.00"),
            category=Category.PASTRY,
            size=Size.SMALL,
            available=False,
        ),
        MenuItemRequest(
            name="Cold Brew",
            price=Decimal("4.50"),
            category=Category.COFFEE,
            size=Size.LARGE,
            available=False,
        ),
    ]
