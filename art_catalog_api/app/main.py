"""
Main entrypoint for the Art Catalog API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router under the
``/api`` prefix.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served with uvicorn, e.g.::

    uvicorn art_catalog_api.app.main:app --port 4000

The catalog fixtures are loaded once, when the application starts.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.router import router as api_router
from .core.catalog import init_catalog
from .core.config import settings
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog on startup."""
    init_catalog()
    logger.info("%s %s started", settings.project_name, settings.api_version)
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured before anything else so that startup can
    safely log messages.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)
    return app


app = create_app()
