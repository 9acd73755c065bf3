"""Product repository — record store plus the listing predicate builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ColumnElement, or_

from products_api.domain.product import Product
from products_api.repositories.base import BaseRepository

if TYPE_CHECKING:
    from products_api.services.product import ProductFilters


class ProductRepository(BaseRepository[Product]):
    model = Product

    @staticmethod
    def build_predicate(filters: ProductFilters) -> list[ColumnElement[bool]]:
        """Translate *filters* into a list of clauses, one per filter present.

        A filter that is ``None`` contributes nothing, so "no price filter" and
        "price filter of 0" stay distinct.
        """
        clauses: list[ColumnElement[bool]] = []

        if filters.category is not None:
            clauses.append(Product.category == filters.category)

        if filters.min_price is not None:
            clauses.append(Product.price >= filters.min_price)

        if filters.max_price is not None:
            clauses.append(Product.price <= filters.max_price)

        if filters.in_stock is not None:
            clauses.append(Product.quantity > 0 if filters.in_stock else Product.quantity == 0)

        if filters.search is not None:
            clauses.append(
                or_(
                    Product.name.icontains(filters.search, autoescape=True),
                    Product.description.icontains(filters.search, autoescape=True),
                )
            )

        return clauses
