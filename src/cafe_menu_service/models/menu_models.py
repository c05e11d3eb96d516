"""Menu data models.

These models represent café menu items, the payloads used to create and
replace them, and the error body returned by the HTTP API.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Enumeration of menu categories."""

    COFFEE = "COFFEE"
    TEA = "TEA"
    PASTRY = "PASTRY"
    OTHER = "OTHER"


class Size(str, Enum):
    """Enumeration of serving sizes."""

    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


class MenuItemRequest(BaseModel):
    """Payload for creating or fully replacing a menu item."""

    name: str = Field(..., description="Item name", min_length=1)
    price: Decimal = Field(..., description="Item price", ge=0)
    description: str | None = Field(None, description="Item description")
    category: Category = Field(..., description="Menu category")
    size: Size = Field(..., description="Serving size")
    available: bool = Field(default=True, description="Whether item is currently available")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that name is not blank."""
        if not v.strip():
            raise ValueError("name must be non-empty")
        return v

    @field_validator("price")
    @classmethod
    def normalize_price(cls, v: Decimal) -> Decimal:
        """Drop the sign from a zero price so "-0.00" is stored as "0.00"."""
        return v.copy_abs() if v.is_zero() else v


class MenuItem(BaseModel):
    """Menu item model.

    Items are immutable once stored. An update swaps the stored instance for a
    new one carrying the same id.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier assigned by the store", ge=1)
    name: str = Field(..., description="Item name", min_length=1)
    price: Decimal = Field(..., description="Item price", ge=0)
    description: str | None = Field(None, description="Item description")
    category: Category = Field(..., description="Menu category")
    size: Size = Field(..., description="Serving size")
    available: bool = Field(default=True, description="Whether item is currently available")

    @field_validator("price")
    @classmethod
    def normalize_price(cls, v: Decimal) -> Decimal:
        """Drop the sign from a zero price."""
        return v.copy_abs() if v.is_zero() else v

    @classmethod
    def from_request(cls, item_id: int, request: MenuItemRequest) -> "MenuItem":
        """Build a menu item from a request payload.

        Args:
            item_id: Identifier to assign
            request: Create or update payload

        Returns:
            MenuItem: New item carrying every field of the request
        """
        return cls(id=item_id, **request.model_dump())


class ApiError(BaseModel):
    """Structured error body returned on failed requests."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="HTTP reason phrase")
    message: str | None = Field(None, description="Human readable error message")
    path: str | None = Field(None, description="Request path that failed")
