"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by id, in insertion order, and hands out
sequential integer ids on first save.  Used as a lightweight test double
and for exercising the service without a database.
"""

from __future__ import annotations

import copy
from typing import Dict, Iterable, List, Optional

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductInMemoryRepository(IProductRepository):
    """Dict-backed Product repository.

    The store holds snapshots: ``save`` keeps a copy of the entity and the
    ``find_*`` methods return copies.  Mutating a loaded product has no
    effect until ``save`` accepts it, matching a database-backed store
    where a rejected write leaves the stored rows unchanged.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: Dict[int, Product] = {}
        self._last_id = 0
        for product in products or ():
            self.save(product)

    def find_by_id(self, id: int) -> Optional[Product]:
        product = self._products.get(id)
        return copy.copy(product) if product is not None else None

    def find_all(self) -> List[Product]:
        return [copy.copy(p) for p in self._products.values()]

    def find_by_name_and_brand(self, name: str, brand: str) -> Optional[Product]:
        stored = self._stored_pair_holder(name, brand)
        return copy.copy(stored) if stored is not None else None

    def save(self, entity: Product) -> Product:
        """Store a snapshot of the entity, assigning an id when it has none.

        Raises:
            ProductAlreadyExists: if another product holds the same pair.
        """
        holder = self._stored_pair_holder(entity.name, entity.brand)
        if holder is not None and holder.id != entity.id:
            raise ProductAlreadyExists(
                f"Product '{entity.name}' by '{entity.brand}' already registered."
            )
        if entity.id is None:
            self._last_id += 1
            entity.id = self._last_id
        else:
            self._last_id = max(self._last_id, entity.id)
        self._products[entity.id] = copy.copy(entity)
        return entity

    def delete(self, entity: Product) -> None:
        self._products.pop(entity.id, None)

    def _stored_pair_holder(self, name: str, brand: str) -> Optional[Product]:
        for product in self._products.values():
            if product.name == name and product.brand == brand:
                return product
        return None
