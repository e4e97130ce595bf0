"""Product domain exceptions.

Raised by the Service Layer and serialized verbatim across the RPC
boundary as ``{"message", "status"}``.  Both carry a client-error (400)
status: the caller can recover by retrying with other ids.
"""

from __future__ import annotations

from modules.core.exceptions import RpcException


class ProductNotFound(RpcException):
    """The requested product does not exist, is unavailable, or could not be written."""


class ProductsNotFound(RpcException):
    """A bulk existence check matched fewer products than requested ids."""

    def __init__(self, message: str = "Some products were not found", status: int | None = None) -> None:
        super().__init__(message, status)
