"""Request logging middleware."""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("product_catalog_api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log ``METHOD URL`` for each request and the status it produced."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info("%s %s", request.method, path)
        response = await call_next(request)
        logger.debug("%s %s -> %s", request.method, path, response.status_code)
        return response
