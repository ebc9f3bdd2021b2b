"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: input for creation and full (PUT) updates.
- ``PartialProductInputDTO``: input for partial (PATCH) updates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Name = Annotated[str, Field(max_length=255)]
Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
# Upper bound of the integer column on every supported backend; booleans
# are not accepted as counts.
STOCK_MAX = 2147483647
Stock = Annotated[int, Field(strict=True, le=STOCK_MAX)]


def _check_price(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and v <= 0:
        raise ValueError("Price must be greater than zero.")
    return v


def _check_stock(v: Optional[int]) -> Optional[int]:
    if v is not None and v <= 0:
        raise ValueError("Stock must be greater than zero.")
    return v


class ProductInputDTO(BaseModel):
    """Immutable DTO for product creation and full update requests.

    Validates:
    - ``name`` is a non-blank string.
    - ``price`` is a Decimal greater than zero (RN-PRO-002).
    - ``stock`` is an integer greater than zero (RN-PRO-003) and fits the
      ``stock`` column.

    ``price`` and ``stock`` are required; ``description`` is optional.
    """

    model_config = ConfigDict(frozen=True)

    name: Name
    description: str = ""
    price: Price
    stock: Stock

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank.")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def description_defaults_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_positive(cls, v: int) -> int:
        return _check_stock(v)


class PartialProductInputDTO(BaseModel):
    """Immutable DTO for partial product updates.

    All fields are optional.  Blank ``name`` / ``description`` values are
    accepted here and ignored by the service.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[Name] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    stock: Optional[Stock] = None

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _check_price(v)

    @field_validator("stock")
    @classmethod
    def stock_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        return _check_stock(v)
