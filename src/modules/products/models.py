"""Product model for the catalog.

Business rules implemented:
- A product is present in the catalog only while ``available`` is true.
- Soft delete flips ``available`` to false (inherited from AvailabilityModel);
  rows are never physically removed.
- Price cannot be negative.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import AvailabilityModel


class Product(AvailabilityModel):
    """Catalog product.

    ``id`` is assigned by the store and never changes.  Default ordering is
    by ``id`` so paginated windows stay stable between calls.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
