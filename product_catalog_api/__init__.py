"""
Top-level package for the Product Catalog API.

All functionality lives in submodules under ``app``; run the service
with ``python run.py`` or the ``product-catalog-api`` console script.
"""

__all__ = []
