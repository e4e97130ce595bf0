from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Keyboard", "75.00"),
    ("Mouse", "150.00"),
    ("Monitor", "1250.00"),
    ("Headphones", "320.50"),
    ("Webcam", "89.90"),
    ("USB-C Hub", "45.00"),
    ("Laptop Stand", "39.99"),
    ("Desk Lamp", "27.35"),
    ("Microphone", "210.00"),
    ("Speakers", "99.00"),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--unavailable",
            type=int,
            default=0,
            help="Number of seeded products to soft-delete afterwards.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding catalog products...")

        products = self._seed_products()
        removed = self._soft_delete_some(products, options["unavailable"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={len(products)}, "
                f"unavailable={removed}"
            )
        )

    def _seed_products(self) -> list[Product]:
        products: list[Product] = []
        for name, price in SEED_PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"price": Decimal(price)},
            )
            products.append(product)
        return products

    def _soft_delete_some(self, products: list[Product], count: int) -> int:
        chosen = random.sample(products, min(count, len(products)))
        for product in chosen:
            product.available = False
            product.save(update_fields=["available"])
        return len(chosen)
