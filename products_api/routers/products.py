"""Product CRUD router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.exceptions import BadRequestError, NotFoundError
from products_api.core.pagination import PaginationParams
from products_api.core.parsing import MAX_SQL_INTEGER, parse_int
from products_api.core.response import DataResponse, ListResponse, MessageResponse, paginated
from products_api.db.base import get_db
from products_api.schemas.product import ProductCreate, ProductOut, ProductUpdate
from products_api.services.product import ProductFilters, ProductService

router = APIRouter(prefix="/products", tags=["Products"])


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> ProductService:
    return ProductService(session)


def valid_product_id(product_id: str = Path(..., description="Product ID")) -> int:
    """Parse the path ID leniently; reject anything that is not a positive integer."""
    parsed = parse_int(product_id)
    if parsed is None or parsed <= 0:
        raise BadRequestError("Invalid ID parameter")
    # No row can have an ID past the SQLite INTEGER range
    if parsed > MAX_SQL_INTEGER:
        raise NotFoundError("Product")
    return parsed


def product_filters(
    category: Optional[str] = Query(default=None, description="Exact category match"),
    min_price: Optional[str] = Query(default=None, alias="minPrice", description="Inclusive lower price bound"),
    max_price: Optional[str] = Query(default=None, alias="maxPrice", description="Inclusive upper price bound"),
    in_stock: Optional[str] = Query(default=None, alias="inStock", description="'true' or 'false'"),
    search: Optional[str] = Query(default=None, description="Case-insensitive match on name or description"),
) -> ProductFilters:
    return ProductFilters.from_query(
        category=category,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        search=search,
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[ProductOut])
async def list_products(
    filters: ProductFilters = Depends(product_filters),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List products. Filter by category, minPrice, maxPrice, inStock, search; paginate with page, limit."""
    items, meta = await _svc(session).list_products(filters, pagination)
    return paginated([ProductOut.model_validate(p) for p in items], meta, noun="product")


@router.post("", response_model=DataResponse[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a new product."""
    product = await _svc(session).create_product(body)
    return {"data": ProductOut.model_validate(product), "message": "Product created successfully"}


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(
    product_id: int = Depends(valid_product_id),
    session: AsyncSession = Depends(get_db),
):
    product = await _svc(session).get_product(product_id)
    return {"data": ProductOut.model_validate(product)}


@router.put("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(
    body: ProductUpdate,
    product_id: int = Depends(valid_product_id),
    session: AsyncSession = Depends(get_db),
):
    product = await _svc(session).update_product(product_id, body)
    return {"data": ProductOut.model_validate(product), "message": "Product updated successfully"}


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int = Depends(valid_product_id),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_product(product_id)
    return {"message": "Product deleted successfully"}
