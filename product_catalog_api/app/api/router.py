"""
Top-level API router.

This router aggregates the endpoint routers.  When new endpoints are
added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import pages, products

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(products.router, prefix="/products", tags=["products"])
