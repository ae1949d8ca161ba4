from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import ProductAlreadyExists
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("T-Shirt", "Levis", Decimal("50.00"), 20),
    ("Jean", "Levis", Decimal("65.00"), 23),
    ("Jacket", "Levis", Decimal("120.00"), 8),
    ("Sneakers", "Nike", Decimal("89.90"), 35),
    ("Hoodie", "Nike", Decimal("74.50"), 14),
    ("Cap", "Adidas", Decimal("19.99"), 60),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products (skips existing ones)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")
        service = ProductService(repository=ProductDjangoRepository())

        created = skipped = 0
        for name, brand, price, stock in SEED_PRODUCTS:
            dto = ProductRequestDTO(name=name, brand=brand, price=price, stock=stock)
            try:
                service.create_new_product(dto)
            except ProductAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
