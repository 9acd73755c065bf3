"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  product.py  — the products table
  mixins.py   — shared TimestampMixin
"""

from products_api.domain.product import Product

__all__ = [
    "Product",
]
