"""FastAPI application exposing the menu item CRUD endpoints."""

import logging
from decimal import Decimal
from http import HTTPStatus
from typing import Annotated, Any, cast

from fastapi import FastAPI, Path, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from cafe_menu_service.models.menu_models import ApiError, Category, MenuItem, MenuItemRequest
from cafe_menu_service.services.menu_service import MenuItemNotFoundError, MenuService

logger = logging.getLogger(__name__)

# Plain integer literals only; "1.0", "+1" and " 1" are malformed ids
ItemIdPath = Annotated[
    str, Path(pattern=r"^-?[0-9]+$", description="Menu item identifier")
]


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    item_count: int


def _api_error_response(
    status_code: int,
    message: str | None,
    path: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    error = ApiError(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=path,
    )
    return JSONResponse(
        status_code=status_code, content=error.model_dump(mode="json"), headers=headers
    )


def _describe_validation_errors(errors: list[Any]) -> str:
    parts = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Request validation failed"


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _api_error_response(404, str(exc), request.url.path)


async def _validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    message = _describe_validation_errors(list(validation_exc.errors()))
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return _api_error_response(400, message, request.url.path)


async def _http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else None
    return _api_error_response(
        http_exc.status_code, message, request.url.path, headers=http_exc.headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and request errors to ApiError responses.

    Args:
        app: Application to register the handlers on
    """
    app.add_exception_handler(MenuItemNotFoundError, _not_found_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)


def create_app(menu_service: MenuService) -> FastAPI:
    """Create and configure the FastAPI application.

    Route functions are synchronous, so FastAPI runs them in its worker
    thread pool and the menu service may be called concurrently.

    Args:
        menu_service: Service backing the menu item endpoints

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Café Menu Service",
        description="In-memory CRUD API for managing a café's menu items",
        version="1.0.0",
    )

    app.state.menu_service = menu_service
    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns:
            Health status and the number of stored menu items
        """
        return HealthResponse(status="healthy", item_count=app.state.menu_service.count_items())

    @app.get("/menu-items", response_model=list[MenuItem], tags=["Menu Items"])
    def list_menu_items(
        category: Category | None = None,
        min_price: Decimal | None = Query(None, alias="minPrice"),
        max_price: Decimal | None = Query(None, alias="maxPrice"),
        available: bool | None = None,
    ) -> list[MenuItem]:
        """List menu items, filtered by any combination of the query parameters.

        Args:
            category: Only items in this category
            min_price: Only items priced at or above this amount
            max_price: Only items priced at or below this amount
            available: Only items with this availability

        Returns:
            Matching menu items ordered by id
        """
        items: list[MenuItem] = app.state.menu_service.list_items(
            category=category,
            min_price=min_price,
            max_price=max_price,
            available=available,
        )
        return items

    @app.get("/menu-items/{item_id}", response_model=MenuItem, tags=["Menu Items"])
    def get_menu_item(item_id: ItemIdPath) -> MenuItem:
        """Get a single menu item."""
        item: MenuItem = app.state.menu_service.get_item(int(item_id))
        return item

    @app.post(
        "/menu-items",
        response_model=MenuItem,
        status_code=201,
        tags=["Menu Items"],
    )
    def create_menu_item(request: MenuItemRequest) -> MenuItem:
        """Create a menu item.

        Returns:
            The created item with its assigned id
        """
        item: MenuItem = app.state.menu_service.create_item(request)
        return item

    @app.put("/menu-items/{item_id}", response_model=MenuItem, tags=["Menu Items"])
    def update_menu_item(item_id: ItemIdPath, request: MenuItemRequest) -> MenuItem:
        """Replace a menu item. Every field except the id is overwritten."""
        item: MenuItem = app.state.menu_service.update_item(int(item_id), request)
        return item

    @app.delete(
        "/menu-items/{item_id}",
        status_code=204,
        response_class=Response,
        tags=["Menu Items"],
    )
    def delete_menu_item(item_id: ItemIdPath) -> Response:
        """Delete a menu item."""
        app.state.menu_service.delete_item(int(item_id))
        return Response(status_code=204)

    return app
