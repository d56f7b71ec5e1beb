"""
Product endpoints.

These routes expose CRUD operations over the product collection.  Each
handler coerces its inputs, makes one call into ``ProductService`` and
maps the outcome onto a status code.  Storage failures are not caught
here; the application-level handler for ``StorageError`` turns them
into a 500 response.

Each route is also registered with a trailing slash; the static mount
at ``/`` would otherwise swallow those paths before FastAPI could
redirect them.

Input handling is permissive rather than validating: ids that do not
parse as integers simply match nothing, and malformed ``page`` or
``limit`` values fall back to their defaults.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from product_catalog_api.app.schemas.product import ErrorResponse, ProductRead
from product_catalog_api.app.services.product_service import ProductService, parse_int

router = APIRouter()

NOT_FOUND = "Product not found"

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def get_product_service(request: Request) -> ProductService:
    """Build a service around the store configured on the application."""
    return ProductService(request.app.state.product_store)


@router.get("", response_model=List[ProductRead], responses=ERROR_RESPONSES)
@router.get("/", response_model=List[ProductRead], include_in_schema=False)
async def list_products(
    page: Optional[str] = Query(None, description="1-based page number, default 1"),
    limit: Optional[str] = Query(None, description="Page size, default 10"),
    search: Optional[str] = Query(None, description="Case-insensitive description search"),
    service: ProductService = Depends(get_product_service),
) -> List[Dict[str, Any]]:
    """Return a page of products, optionally filtered by description.

    Filtering is applied before pagination.  A page past the end yields
    an empty list rather than 404.
    """
    return await service.list_products(page=page, limit=limit, search=search)


@router.get("/{product_id}", response_model=ProductRead, responses=ERROR_RESPONSES)
@router.get("/{product_id}/", response_model=ProductRead, include_in_schema=False)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Retrieve a single product by ID.  Returns 404 if it is not found."""
    product = await service.get_product(parse_int(product_id))
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return product


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_product(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Create a product from arbitrary fields; the store assigns ``id``."""
    return await service.create_product(payload or {})


@router.put("/{product_id}", response_model=ProductRead, responses=ERROR_RESPONSES)
@router.put("/{product_id}/", response_model=ProductRead, include_in_schema=False)
async def update_product(
    product_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Merge the body into an existing product.  ``id`` never changes."""
    product = await service.update_product(parse_int(product_id), payload or {})
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
@router.delete("/{product_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> None:
    deleted = await service.delete_product(parse_int(product_id))
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
