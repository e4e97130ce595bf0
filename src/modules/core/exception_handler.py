"""DRF exception handler rendering structured errors.

``RpcException`` and Pydantic validation failures are rendered with the
same ``{"message", "status"}`` body used across the RPC boundary; every
other exception falls through to DRF's default handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import RpcException
from modules.core.rpc import validation_error


def rpc_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, PydanticValidationError):
        exc = validation_error(exc)
    if isinstance(exc, RpcException):
        return Response(exc.to_dict(), status=exc.status)
    return exception_handler(exc, context)
