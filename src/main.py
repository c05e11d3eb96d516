"""Main application entry point for the café menu service.

Exposes a module-level ``app`` for ``uvicorn main:app`` from a source
checkout. The factories live in ``cafe_menu_service.app`` so the installed
distribution can run without this file.
"""

import os

from fastapi import FastAPI

from cafe_menu_service.app import create_application, create_menu_service, run

__all__ = ["app", "create_application", "create_menu_service"]

# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    run()
