"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  The
repository holds the model manager by composition and exposes only the
catalog's operations.

Reads follow the Null Object pattern (``None`` for a missing row).  Updates
return an explicit ``Ok``/``Err`` result so the Service Layer decides how a
store failure surfaces to callers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.results import Err, Ok, Result
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(self, manager: Optional[models.Manager] = None) -> None:
        self._products = manager if manager is not None else Product.objects

    def create(self, data: Dict[str, Any]) -> Product:
        """Insert a product.  Store errors propagate unmodified."""
        return self._products.create(**data)

    def get_available(self, id: int) -> Optional[Product]:
        try:
            return self._products.available().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def count_available(self) -> int:
        return self._products.available().count()

    def list_available(self, offset: int, limit: int) -> List[Product]:
        return list(self._products.available()[offset : offset + limit])

    def list_by_ids(self, ids: List[int]) -> List[Product]:
        """Return products with an id in ``ids``, ignoring availability."""
        return list(self._products.filter(id__in=ids))

    def update(self, id: int, data: Dict[str, Any]) -> Result[Product]:
        """Apply ``data`` to the product ``id``, ignoring availability.

        Returns ``Err`` when the row is missing or the store rejects the
        write; the transaction is rolled back in that case.
        """
        try:
            with transaction.atomic():
                product = self._products.select_for_update().get(id=id)
                for field, value in data.items():
                    setattr(product, field, value)
                product.save(update_fields=list(data))
        except Exception as exc:  # any store failure becomes an Err
            return Err(exc)

        logger.info("product.saved", product_id=product.id, fields=sorted(data))
        return Ok(product)
