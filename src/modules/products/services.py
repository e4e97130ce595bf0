"""Product service layer (Use Cases).

Orchestrates the catalog operations for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- New products start available; callers cannot choose otherwise.
- Listing and ``get_product`` only see available products.
- ``update_product`` / ``remove_product`` / ``validate_products`` look past
  the availability flag.
- Any failed write maps to the same ``ProductNotFound`` error; the cause
  is discarded.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Iterable, List

import structlog

from modules.core.results import Err
from modules.products.dtos import PageMetaDTO
from modules.products.exceptions import ProductNotFound, ProductsNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

WRITE_FAILED_MESSAGE = "Product not found"


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Persist a new product; store failures propagate unmodified."""
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Dict[str, Product]:
        """Apply the supplied fields to product ``id``.

        The ``id`` argument is authoritative; an ``id`` carried in the DTO
        is dropped.  Unavailable products can still be updated.

        Raises:
            ProductNotFound: if the store rejects the update for any reason.
        """
        product = self._write(id, dto.changes())
        logger.info("product.updated", product_id=id)
        return {"data": product}

    def remove_product(self, id: int) -> Product:
        """Soft-delete product ``id`` by clearing its ``available`` flag.

        Raises:
            ProductNotFound: if the store rejects the update for any reason.
        """
        product = self._write(id, {"available": False})
        logger.info("product.soft_deleted", product_id=id)
        return product

    def _write(self, id: int, changes: Dict[str, Any]) -> Product:
        result = self._repo.update(id, changes)
        if isinstance(result, Err):
            raise ProductNotFound(WRITE_FAILED_MESSAGE)
        return result.value

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, pagination: PaginationDTO) -> Dict[str, Any]:
        """Return one page of available products plus page metadata.

        A page past the last one yields an empty ``data`` list.
        """
        page, limit = pagination.page, pagination.limit
        total = self._repo.count_available()
        last_page = math.ceil(total / limit)

        products = self._repo.list_available(offset=(page - 1) * limit, limit=limit)
        return {
            "data": products,
            "meta": PageMetaDTO(page=page, total=total, last_page=last_page),
        }

    def get_product(self, id: int) -> Dict[str, Product]:
        """Retrieve a single available product.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        product = self._repo.get_available(id)
        if product is None:
            raise ProductNotFound(f"Product with id # {id} not found")
        return {"data": product}

    def validate_products(self, ids: Iterable[int]) -> List[Product]:
        """Check that every id names an existing row, available or not.

        Duplicate ids are counted once.

        Raises:
            ProductsNotFound: if at least one id has no row.
        """
        unique_ids = list(set(ids))
        products = self._repo.list_by_ids(unique_ids)
        if len(products) != len(unique_ids):
            logger.info(
                "product.validation_mismatch",
                requested=len(unique_ids),
                found=len(products),
            )
            raise ProductsNotFound()
        return products
