"""
Service layer for the product collection.

The module-level functions are the query and mutation rules applied to
an in-memory copy of the collection: id assignment, description search,
pagination, lookup, insert, update and removal.  They never touch the
disk and return new lists rather than mutating their input.

``ProductService`` drives one request's worth of work: a single
``load_all`` from the ``ProductStore``, one of the functions below and,
for mutations, a single ``save_all`` of the whole collection.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional, Tuple

from product_catalog_api.app.core.storage import Product, ProductStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``.

    ``"12"`` and ``"12abc"`` both give ``12``; anything without leading
    digits gives ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def next_id(products: List[Product]) -> int:
    """Return the id for a new record: last record's id plus one.

    The last element is used, not the largest id, so a collection that
    is not ordered by id can hand out an id that is already taken.
    """
    if not products:
        return 1
    return products[-1]["id"] + 1


def filter_by_description(products: List[Product], needle: str) -> List[Product]:
    """Case-insensitive substring search on ``description``.

    Records whose ``description`` is missing or not a string never match.
    """
    needle = needle.lower()
    return [
        p
        for p in products
        if isinstance(p.get("description"), str) and needle in p["description"].lower()
    ]


def _positive_or_default(value: Any, default: int) -> int:
    number = parse_int(value)
    if number is None or number < 1:
        return default
    return number


def paginate(products: List[Product], page: Any = None, limit: Any = None) -> List[Product]:
    """Return page ``page`` (1-based) of ``limit`` records.

    Missing, non-numeric or non-positive values fall back to page 1 and
    a limit of 10.  Pages past the end are empty.
    """
    page = _positive_or_default(page, DEFAULT_PAGE)
    limit = _positive_or_default(limit, DEFAULT_LIMIT)
    start = (page - 1) * limit
    return products[start:start + limit]


def _has_id(product: Product, product_id: Optional[int]) -> bool:
    # ``True == 1`` in Python; a boolean id never matches.
    value = product.get("id")
    if product_id is None or isinstance(value, bool):
        return False
    return value == product_id


def find_by_id(products: List[Product], product_id: Optional[int]) -> Optional[Product]:
    if product_id is None:
        return None
    return next((p for p in products if _has_id(p, product_id)), None)


def insert_record(products: List[Product], partial: Mapping[str, Any]) -> Tuple[List[Product], Product]:
    """Append ``partial`` under a freshly assigned id.

    Any ``id`` supplied in ``partial`` is replaced.
    """
    created = dict(partial)
    created["id"] = next_id(products)
    return [*products, created], created


def update_record(
    products: List[Product], product_id: Optional[int], patch: Mapping[str, Any]
) -> Optional[Tuple[List[Product], Product]]:
    """Shallow-merge ``patch`` over the record with ``product_id``.

    Patch values win for every field except ``id``.  Returns ``None``
    when no record matches.
    """
    if product_id is None:
        return None
    for index, current in enumerate(products):
        if _has_id(current, product_id):
            merged = {**current, **patch, "id": current["id"]}
            updated = list(products)
            updated[index] = merged
            return updated, merged
    return None


def remove_record(products: List[Product], product_id: Optional[int]) -> Tuple[List[Product], bool]:
    remaining = [p for p in products if not _has_id(p, product_id)]
    return remaining, len(remaining) != len(products)


class ProductService:
    """Product operations backed by a ``ProductStore``."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    async def list_products(
        self,
        page: Any = None,
        limit: Any = None,
        search: Optional[str] = None,
    ) -> List[Product]:
        """Return one page of products, filtered first when ``search`` is set."""
        products = await self.store.load_all()
        if search:
            products = filter_by_description(products, search)
        return paginate(products, page, limit)

    async def get_product(self, product_id: Optional[int]) -> Optional[Product]:
        products = await self.store.load_all()
        return find_by_id(products, product_id)

    async def create_product(self, data: Mapping[str, Any]) -> Product:
        products = await self.store.load_all()
        products, created = insert_record(products, data)
        await self.store.save_all(products)
        logger.info("Created product %s", created["id"])
        return created

    async def update_product(
        self, product_id: Optional[int], patch: Mapping[str, Any]
    ) -> Optional[Product]:
        """Merge ``patch`` into a product and persist it.

        Returns the merged product, or ``None`` if it does not exist (in
        which case nothing is written).
        """
        products = await self.store.load_all()
        result = update_record(products, product_id, patch)
        if result is None:
            return None
        products, updated = result
        await self.store.save_all(products)
        logger.info("Updated product %s", product_id)
        return updated

    async def delete_product(self, product_id: Optional[int]) -> bool:
        """Delete a product.  Returns ``True`` if a record was removed."""
        products = await self.store.load_all()
        remaining, removed = remove_record(products, product_id)
        if not removed:
            return False
        await self.store.save_all(remaining)
        logger.info("Deleted product %s", product_id)
        return True
