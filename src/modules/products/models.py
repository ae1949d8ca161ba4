"""Product model.

Business rules implemented:
- RN-PRO-001: the ``(name, brand)`` pair is unique in the catalog.
- RN-PRO-002: Price cannot be negative.
- RN-PRO-003: Stock cannot be negative.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel

NAME_BRAND_CONSTRAINT = "products_name_brand_unique"


class Product(BaseModel):
    """Catalog entry.

    The ``id`` is assigned by the database on the first save and never
    changes afterwards; updates mutate the same row in place.
    """

    name = models.CharField(max_length=255)
    brand = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    stock = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "brand"],
                name=NAME_BRAND_CONSTRAINT,
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.brand})"
