"""Product repositories package."""

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import ProductInMemoryRepository

__all__ = ["IProductRepository", "ProductDjangoRepository", "ProductInMemoryRepository"]
