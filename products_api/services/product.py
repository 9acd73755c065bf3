"""Product service — listing engine and CRUD business logic.

Routers hand over raw, untrusted query values; this module turns them into a
:class:`ProductFilters` and runs the count-then-page read. Storage failures
are logged and surfaced as :class:`DataAccessError` so no driver detail
reaches the client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.exceptions import DataAccessError, NotFoundError
from products_api.core.pagination import PageMeta, PaginationParams, build_page_meta
from products_api.core.parsing import parse_float
from products_api.domain.product import Product
from products_api.repositories.product import ProductRepository
from products_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductFilters:
    """Normalized listing filters. ``None`` means "not applied"."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock: bool | None = None
    search: str | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
        in_stock: str | None = None,
        search: str | None = None,
    ) -> ProductFilters:
        """Build filters from raw query values; anything unusable is dropped."""
        return cls(
            category=category or None,
            min_price=parse_float(min_price),
            max_price=parse_float(max_price),
            in_stock={"true": True, "false": False}.get(in_stock) if in_stock else None,
            search=search or None,
        )


class ProductService:
    def __init__(self, session: AsyncSession):
        self._repo = ProductRepository(session)

    async def list_products(
        self, filters: ProductFilters, pagination: PaginationParams
    ) -> tuple[list[Product], PageMeta]:
        predicate = self._repo.build_predicate(filters)
        try:
            total = await self._repo.count(predicate)
            # Pages past the end are empty; their offset may not fit in an SQL integer
            items = []
            if pagination.offset < total:
                items = await self._repo.query(
                    predicate,
                    order_by="created_at",
                    order="desc",
                    offset=pagination.offset,
                    limit=pagination.limit,
                )
        except SQLAlchemyError as exc:
            logger.error("Error listing products: %s", exc)
            raise DataAccessError("Failed to list products") from exc

        return items, build_page_meta(total, pagination.page, pagination.limit)

    async def get_product(self, product_id: int) -> Product:
        try:
            product = await self._repo.get_by_id(product_id)
        except SQLAlchemyError as exc:
            logger.error("Error getting product %s: %s", product_id, exc)
            raise DataAccessError("Failed to get product") from exc
        if product is None:
            raise NotFoundError("Product")
        return product

    async def create_product(self, data: ProductCreate) -> Product:
        try:
            product = await self._repo.create(**data.model_dump())
        except SQLAlchemyError as exc:
            logger.error("Error creating product: %s", exc)
            raise DataAccessError("Failed to create product") from exc
        logger.info("Created product %s", product.id)
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        _ = await self.get_product(product_id)  # raises 404 if missing
        try:
            updated = await self._repo.update(product_id, **data.model_dump(exclude_unset=True))
        except SQLAlchemyError as exc:
            logger.error("Error updating product %s: %s", product_id, exc)
            raise DataAccessError("Failed to update product") from exc
        if updated is None:
            raise NotFoundError("Product")
        return updated

    async def delete_product(self, product_id: int) -> None:
        _ = await self.get_product(product_id)
        try:
            await self._repo.delete(product_id)
        except SQLAlchemyError as exc:
            logger.error("Error deleting product %s: %s", product_id, exc)
            raise DataAccessError("Failed to delete product") from exc
        logger.info("Deleted product %s", product_id)
