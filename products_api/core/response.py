"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from products_api.core.pagination import PageMeta

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Body-less success envelope: `{ success, message }`"""

    success: bool = True
    message: str | None = None

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class DataResponse(MessageResponse, Generic[T]):
    """Single-item response envelope: `{ success, data: {...}, message }`"""

    data: T


class ListResponse(MessageResponse, Generic[T]):
    """Paginated list response envelope: `{ success, data: [...], message, pagination: {...} }`"""

    data: list[T]
    pagination: PageMeta


def paginated(items: list, meta: PageMeta, noun: str = "item") -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {
        "data": items,
        "message": (
            f"Found {len(items)} {noun}(s) on page {meta.page} of {meta.total_pages}"
        ),
        "pagination": meta,
    }
