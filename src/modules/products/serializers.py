"""Product DRF serializers for output rendering.

Input validation lives in the Pydantic DTOs (``dtos.py``); these
serializers only turn Product instances into JSON-ready payloads, shared by
the HTTP views and the Celery message patterns.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


def serialize_products(products: Iterable[Product]) -> List[Dict[str, Any]]:
    return ProductSerializer(list(products), many=True).data


def serialize_page(page: Dict[str, Any]) -> Dict[str, Any]:
    """Render ``ProductService.list_products`` output for the wire."""
    return {
        "data": serialize_products(page["data"]),
        "meta": page["meta"].to_wire(),
    }
