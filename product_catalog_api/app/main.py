"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application: logging, the product
store, error handlers, request logging, API routes and the static
assets mount.  ``create_app`` builds the app from an explicit
``Settings`` object; ``app`` is the instance built from environment
defaults, which makes it easy to run with uvicorn::

    uvicorn product_catalog_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.request_logging import RequestLoggingMiddleware
from .core.storage import ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this instance.  Defaults to the settings read
        from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the pieces below
    # can log safely.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.product_store = ProductStore(settings.data_path)

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(api_router)

    # The static mount catches every path not matched above, so it must
    # be added after the API routes.
    public_path = settings.public_path
    if public_path.is_dir():
        app.mount("/", StaticFiles(directory=str(public_path)), name="public")
    else:
        logger.warning("Public directory %s not found; static files disabled", public_path)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Server is running on http://localhost:%s", settings.port)
        logger.info("Serving products from %s", app.state.product_store.path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
