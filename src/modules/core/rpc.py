"""Message-pattern dispatch over Celery.

Each catalog operation is published as a named Celery task (the message
pattern).  The task validates its payload into a Pydantic DTO, runs the
handler and wraps the outcome in a JSON envelope:

    {"result": <payload>}                      on success
    {"error": {"message": ..., "status": ...}} on a structured failure

Only ``RpcException`` and DTO validation errors become envelopes.  Anything
else (store failures while creating or listing) propagates out of the task
unmodified, so Celery reports it as a failed task.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

import structlog
from celery import shared_task
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import RpcException
from modules.core.middleware import bind_correlation_id

logger = structlog.get_logger(__name__)

Envelope = Dict[str, Any]


def success(result: Any) -> Envelope:
    return {"result": result}


def failure(exc: RpcException) -> Envelope:
    return {"error": exc.to_dict()}


def validation_error(exc: PydanticValidationError) -> RpcException:
    """Collapse a Pydantic error list into a single 400 ``RpcException``."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'payload'}: {err['msg']}"
        for err in exc.errors()
    )
    return RpcException(details)


def dispatch(
    pattern: str,
    handler: Callable[[Any], Any],
    payload: Any,
    dto: Optional[Type[BaseModel]] = None,
    correlation_id: Optional[str] = None,
) -> Envelope:
    """Run ``handler`` for one inbound message and build its envelope."""
    bind_correlation_id(correlation_id)
    with structlog.contextvars.bound_contextvars(rpc_pattern=pattern):
        try:
            message = dto.model_validate(payload or {}) if dto else payload
        except PydanticValidationError as exc:
            error = validation_error(exc)
            logger.warning("rpc.invalid_payload", detail=error.message)
            return failure(error)

        try:
            result = handler(message)
        except RpcException as exc:
            logger.info("rpc.failed", message=exc.message, status=exc.status)
            return failure(exc)

        logger.debug("rpc.completed")
        return success(result)


def message_pattern(
    pattern: str, dto: Optional[Type[BaseModel]] = None
) -> Callable[[Callable[[Any], Any]], Any]:
    """Register ``handler`` as the Celery task named ``pattern``.

    Usage::

        @message_pattern("products.find_one", dto=ProductIdDTO)
        def find_one_product(message: ProductIdDTO) -> dict:
            ...

        find_one_product.delay({"id": 1}).get()
    """

    def decorator(handler: Callable[[Any], Any]):
        def run(self, payload: Any = None) -> Envelope:
            return dispatch(
                pattern,
                handler,
                payload,
                dto=dto,
                correlation_id=self.request.id,
            )

        run.__name__ = handler.__name__
        run.__doc__ = handler.__doc__
        return shared_task(name=pattern, bind=True)(run)

    return decorator
