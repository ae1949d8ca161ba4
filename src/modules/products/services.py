"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and returning
``ProductResponseDTO`` projections rather than entities.

Business rules enforced here:
- RN-PRO-001: the ``(name, brand)`` pair must be unique.
- RN-PRO-002/003: price and stock are non-negative (validated by DTO).

Every check runs before the single write, so a failed operation leaves
the repository untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.dtos import ProductResponseDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductRequestDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product_by_id(self, id: int) -> ProductResponseDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._find_or_raise(id)
        logger.info("product.retrieved", product_id=id)
        return ProductResponseDTO.from_entity(product)

    def get_all_products(self) -> List[ProductResponseDTO]:
        """Return every product in repository order.

        An empty catalog is reported as an error, not an empty list.

        Raises:
            ProductNotFound: if no product is registered.
        """
        products = self._repo.find_all()
        if not products:
            logger.warning("product.catalog_empty")
            raise ProductNotFound("No products registered.")
        logger.info("product.listed", count=len(products))
        return [ProductResponseDTO.from_entity(p) for p in products]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_new_product(self, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Create a new product after enforcing uniqueness rules.

        Raises:
            ProductAlreadyExists: if the name/brand pair is taken (RN-PRO-001).
        """
        log = logger.bind(name=dto.name, brand=dto.brand)

        if self._repo.find_by_name_and_brand(dto.name, dto.brand) is not None:
            log.warning("product.duplicate_name_brand")
            raise ProductAlreadyExists(
                f"Product '{dto.name}' by '{dto.brand}' already registered."
            )

        product = Product(
            name=dto.name,
            brand=dto.brand,
            price=dto.price,
            stock=dto.stock,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=product.id)
        return ProductResponseDTO.from_entity(product)

    def update_product(self, id: int, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Overwrite every mutable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._find_or_raise(id)

        for field in ("name", "brand", "price", "stock"):
            setattr(product, field, getattr(dto, field))

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return ProductResponseDTO.from_entity(product)

    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._find_or_raise(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_or_raise(self, id: int) -> Product:
        product = self._repo.find_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
