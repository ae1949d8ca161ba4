"""Product repository interface.

Extends ``IRepository[Product]`` with the look-up required by
business rule RN-PRO-001 (unique name/brand pair).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_name_and_brand(self, name: str, brand: str) -> Optional[Product]:
        """Retrieve the product registered under ``(name, brand)``, if any."""
