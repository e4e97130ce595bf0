import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger()


def bind_correlation_id(cid: str | None = None) -> str:
    """Reset structlog context and bind ``cid`` (or a fresh UUID4) to it.

    Shared by the HTTP middleware and the RPC dispatcher so every log line
    of a single inbound call carries the same ``correlation_id``.
    """
    cid = cid or str(uuid.uuid4())
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=cid)
    return cid


class CorrelationIdMiddleware:
    """Extracts or generates a correlation ID for each HTTP request.

    Reads the X-Request-ID header and echoes it back on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = bind_correlation_id(request.META.get("HTTP_X_REQUEST_ID"))

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )

        response["X-Request-ID"] = cid
        return response
