"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The views only build DTOs after ``validate_request`` has accepted the
raw request, so the validators below normalise values (text name,
two-decimal price) and guard the model invariants a second time.

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for full product replacement (PUT).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.constants import (
    EMPTY_NAME,
    INVALID_PRICE,
    MAX_NAME_LENGTH,
    MAX_PRICE,
    NAME_TOO_LONG,
)

CENT = Decimal("0.01")


def _normalise_name(value: Any) -> str:
    if value is None:
        raise ValueError(EMPTY_NAME)
    name = str(value).strip()
    if not name:
        raise ValueError(EMPTY_NAME)
    if len(name) > MAX_NAME_LENGTH:
        raise ValueError(NAME_TOO_LONG)
    return name


def _normalise_price(value: Decimal) -> Decimal:
    price = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if price <= 0 or price > MAX_PRICE:
        raise ValueError(INVALID_PRICE)
    return price


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    availability: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_empty(cls, v: Any) -> str:
        return _normalise_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)


class ReplaceProductDTO(BaseModel):
    """Immutable DTO for PUT requests: every field is replaced."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    availability: bool

    @field_validator("name", mode="before")
    @classmethod
    def name_must_not_be_empty(cls, v: Any) -> str:
        return _normalise_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)
