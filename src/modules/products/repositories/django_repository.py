"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern for reads: look-ups
return ``None`` instead of raising, and the Service Layer decides how
to translate a missing entity into a domain error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def find_all(self) -> List[Product]:
        return list(Product.objects.all())

    def find_by_name_and_brand(self, name: str, brand: str) -> Optional[Product]:
        return Product.objects.filter(name=name, brand=brand).first()

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        The database's unique constraint on ``(name, brand)`` is the last
        line of defence against concurrent creates; a violation surfaces
        as ``ProductAlreadyExists``.

        Raises:
            ProductAlreadyExists: if another row already holds the pair.
        """
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError:
            if self._pair_taken_by_other(entity):
                logger.warning(
                    "product.save_rejected_duplicate",
                    name=entity.name,
                    brand=entity.brand,
                )
                raise ProductAlreadyExists(
                    f"Product '{entity.name}' by '{entity.brand}' already registered."
                ) from None
            raise
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        product_id = entity.id
        entity.delete()
        logger.info("product.deleted_row", product_id=product_id)

    def _pair_taken_by_other(self, entity: Product) -> bool:
        return (
            Product.objects.filter(name=entity.name, brand=entity.brand)
            .exclude(id=entity.id)
            .exists()
        )
