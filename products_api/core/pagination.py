"""Pagination helpers for list endpoints.

``page`` and ``limit`` are accepted as raw strings and normalized here rather
than validated by FastAPI, so a bad value degrades to a default instead of
rejecting the request.
"""


import math

from fastapi import Query
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from products_api.core.parsing import parse_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def normalize_page(raw: object) -> int:
    """Absent, non-numeric, zero or negative pages all become page 1."""
    page = parse_int(raw)
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def normalize_limit(raw: object) -> int:
    """Absent, non-numeric or zero limits become 10; others clamp to [1, 100]."""
    limit = parse_int(raw)
    if not limit:
        return DEFAULT_LIMIT
    return min(MAX_LIMIT, max(1, limit))


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=10`."""

    def __init__(
        self,
        page: str | None = Query(default=None, description="Page number (1-based)"),
        limit: str | None = Query(
            default=None, description=f"Items per page (max {MAX_LIMIT})"
        ),
    ):
        self.page = normalize_page(page)
        self.limit = normalize_limit(limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def build_page_meta(total: int, page: int, limit: int) -> PageMeta:
    total_pages = math.ceil(total / limit) if total else 0
    return PageMeta(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        # an empty result has no pages to move between, whatever page was asked for
        has_prev_page=total > 0 and page > 1,
    )
