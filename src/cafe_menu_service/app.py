"""Application factory and server runner for the café menu service."""

import logging
import os

import uvicorn
from fastapi import FastAPI

from cafe_menu_service.handlers.api_handler import create_app
from cafe_menu_service.observability import configure_logging, setup_observability
from cafe_menu_service.repositories.menu_repository import MenuItemRepository
from cafe_menu_service.services.menu_service import MenuService

logger = logging.getLogger(__name__)


def create_menu_service(seed_demo_data: bool | None = None) -> MenuService:
    """Create the menu service backed by a fresh in-memory repository.

    Args:
        seed_demo_data: Whether to insert the demo items. Defaults to the
            SEED_DEMO_DATA environment variable ("true" unless set otherwise).

    Returns:
        MenuService ready to serve requests
    """
    if seed_demo_data is None:
        seed_demo_data = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"

    menu_service = MenuService(repository=MenuItemRepository())

    if seed_demo_data:
        menu_service.seed_demo_items()
    else:
        logger.info("Demo data seeding disabled, starting with an empty menu")

    return menu_service


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the in-memory repository and menu service
    3. Seeds demo data
    4. Creates FastAPI app with the menu endpoints
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing café menu service...")

    menu_service = create_menu_service()
    logger.info(f"Menu service initialized with {menu_service.count_items()} items")

    app = create_app(menu_service=menu_service)

    setup_observability(app)

    logger.info("Café menu service initialized successfully")

    return app


def run() -> None:
    """Serve the application with uvicorn.

    Console entry point for the installed distribution. Runs a single worker
    process since the menu lives in this process's memory.
    """
    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "cafe_menu_service.app:create_application",
        factory=True,
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "false").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
