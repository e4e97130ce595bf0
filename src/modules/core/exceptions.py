"""Structured errors crossing the RPC boundary.

Service-layer failures are raised as ``RpcException`` subclasses.  The
transport layers (Celery message patterns, DRF views) serialize them
verbatim as ``{"message": ..., "status": ...}`` instead of leaking raw
store exceptions to callers.
"""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import status as http_status


class RpcException(Exception):
    """A failure carrying a human-readable message and a status code."""

    default_status = http_status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status if status is not None else self.default_status

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "status": self.status}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status})"
