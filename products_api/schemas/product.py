"""Product Pydantic schemas (request DTOs and response models).

Request validators raise ``ValueError`` with the exact sentence returned to
the client; the exception handler lists them under ``details``.
"""


import math
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator

from products_api.schemas.common import CamelModel


def _has_update(data: dict) -> bool:
    """A body counts as an update if it names name, price or quantity, or sets a
    non-empty description or category. ``{"description": ""}`` alone is not one.
    """
    if any(key in data for key in ("name", "price", "quantity")):
        return True
    return bool(data.get("description") or data.get("category"))


def _non_empty_string(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value


def _non_negative_number(value: Any, message: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(message)
    if not math.isfinite(value) or value < 0:
        raise ValueError(message)
    return value


def _non_negative_integer(value: Any, message: str) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(message)
    return value


class ProductCreate(CamelModel):
    name: str = Field(default=None, validate_default=True)
    description: str | None = None
    price: float = Field(default=None, validate_default=True)
    quantity: int = Field(default=None, validate_default=True)
    category: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return _non_empty_string(value, "Name is required and must be a non-empty string")

    @field_validator("price", mode="before")
    @classmethod
    def _check_price(cls, value: Any) -> float:
        if value is None:
            raise ValueError("Price is required")
        return _non_negative_number(value, "Price must be a non-negative number")

    @field_validator("quantity", mode="before")
    @classmethod
    def _check_quantity(cls, value: Any) -> int:
        if value is None:
            raise ValueError("Quantity is required")
        return _non_negative_integer(value, "Quantity must be a non-negative integer")


class ProductUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    quantity: int | None = None
    category: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_any_field(cls, data: Any) -> Any:
        if isinstance(data, dict) and not _has_update(data):
            raise ValueError("At least one field must be provided for update")
        return data

    # Only run for keys present in the body, so an explicit null is rejected
    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return _non_empty_string(value, "Name must be a non-empty string if provided")

    @field_validator("price", mode="before")
    @classmethod
    def _check_price(cls, value: Any) -> float:
        return _non_negative_number(value, "Price must be a non-negative number if provided")

    @field_validator("quantity", mode="before")
    @classmethod
    def _check_quantity(cls, value: Any) -> int:
        return _non_negative_integer(value, "Quantity must be a non-negative integer if provided")


class ProductOut(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: float
    quantity: int
    category: str | None = None
    created_at: datetime
    updated_at: datetime
