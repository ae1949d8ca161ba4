"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductRequestDTO``: input for creating or fully replacing a product.
- ``ProductResponseDTO``: output projection of a stored product.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

# Column limits of ``Product.price`` and ``Product.stock``.
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
STOCK_MAX = 2147483647


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductRequestDTO(BaseModel):
    """Immutable DTO carrying every mutable product field.

    Validates:
    - ``name`` and ``brand`` are non-empty once stripped.
    - ``price`` is a non-negative Decimal that fits the stored column
      (10 digits, 2 decimal places) (RN-PRO-002).
    - ``stock`` is non-negative and fits the stored integer (RN-PRO-003).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    brand: str
    price: Decimal = Field(
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    stock: int = Field(ge=0, le=STOCK_MAX)

    @field_validator("name", "brand")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Must not be empty.")
        return v.strip()


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponseDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    brand: str
    price: Decimal
    stock: int

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponseDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            price=product.price,
            stock=product.stock,
        )
