"""Entry point for the Product Catalog API.

Starts the FastAPI application under Uvicorn.  Host, port and the
other settings are read from environment variables (see
``product_catalog_api/app/core/config.py``); the port defaults to 3000.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app


async def serve(settings: Settings) -> None:
    """Serve an application built from ``settings`` until shutdown."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    settings = Settings()
    try:
        asyncio.run(serve(settings))
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
