"""Catalog message patterns (Celery tasks).

Each task takes a single JSON payload and returns the envelope built by
``modules.core.rpc``::

    from modules.products.tasks import find_one_product

    find_one_product.delay({"id": 7}).get()
    # {"result": {"data": {...}}}  or
    # {"error": {"message": "Product with id # 7 not found", "status": 400}}
"""

from __future__ import annotations

from typing import Any, Dict, List

from modules.core.rpc import message_pattern
from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    UpdateProductMessageDTO,
    ValidateProductsDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductSerializer,
    serialize_page,
    serialize_products,
)
from modules.products.services import ProductService


def _service() -> ProductService:
    return ProductService(repository=ProductDjangoRepository())


@message_pattern("products.create", dto=CreateProductDTO)
def create_product(dto: CreateProductDTO) -> Dict[str, Any]:
    return ProductSerializer(_service().create_product(dto)).data


@message_pattern("products.find_all", dto=PaginationDTO)
def find_all_products(pagination: PaginationDTO) -> Dict[str, Any]:
    return serialize_page(_service().list_products(pagination))


@message_pattern("products.find_one", dto=ProductIdDTO)
def find_one_product(message: ProductIdDTO) -> Dict[str, Any]:
    result = _service().get_product(message.id)
    return {"data": ProductSerializer(result["data"]).data}


@message_pattern("products.update", dto=UpdateProductMessageDTO)
def update_product(dto: UpdateProductMessageDTO) -> Dict[str, Any]:
    """The payload's ``id`` selects the row and is never written."""
    result = _service().update_product(dto.id, dto)
    return {"data": ProductSerializer(result["data"]).data}


@message_pattern("products.remove", dto=ProductIdDTO)
def remove_product(message: ProductIdDTO) -> Dict[str, Any]:
    return ProductSerializer(_service().remove_product(message.id)).data


@message_pattern("products.validate", dto=ValidateProductsDTO)
def validate_products(message: ValidateProductsDTO) -> List[Dict[str, Any]]:
    return serialize_products(_service().validate_products(message.ids))
