"""Product HTTP gateway.

Exposes ``ProductService`` over HTTP with a DRF ViewSet, mirroring the
Celery message patterns in ``tasks.py``.  DTO validation errors and
``RpcException``s are not caught here: the project-wide exception handler
(``modules.core.exception_handler``) renders them as ``{message, status}``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductSerializer,
    serialize_page,
    serialize_products,
)
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for catalog operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP); all ORM
    access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?page=&limit="""
        pagination = PaginationDTO.model_validate(request.query_params.dict())
        return Response(serialize_page(self._service.list_products(pagination)))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product_id = ProductIdDTO(id=pk).id
        result = self._service.get_product(product_id)
        return Response({"data": ProductSerializer(result["data"]).data})

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO.model_validate(request.data)
        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        product_id = ProductIdDTO(id=pk).id
        dto = UpdateProductDTO.model_validate(request.data)
        result = self._service.update_product(product_id, dto)
        return Response({"data": ProductSerializer(result["data"]).data})

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/ (soft delete)"""
        product_id = ProductIdDTO(id=pk).id
        product = self._service.remove_product(product_id)
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["post"], url_path="validate")
    def validate(self, request: Request) -> Response:
        """POST /api/v1/products/validate/ with ``{"ids": [...]}``"""
        dto = ValidateProductsDTO.model_validate(request.data)
        products = self._service.validate_products(dto.ids)
        return Response(serialize_products(products))
