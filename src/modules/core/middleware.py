import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

GENERIC_ERROR_TITLE = "An unexpected error occurred on the server."
GENERIC_ERROR_DETAIL = "Please contact support."


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

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


class ErrorHandlingMiddleware:
    """Single translation point for unhandled exceptions.

    Any exception escaping a view is logged and rendered as a 500 JSON
    body ``{status, title, detail}``.  ``detail`` carries the raw
    exception message only when ``DEBUG`` is on.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(
        self, request: HttpRequest, exception: Exception
    ) -> JsonResponse:
        logger.error(
            "unhandled_exception",
            method=request.method,
            path=request.get_full_path(),
            error_type=type(exception).__name__,
            exc_info=exception,
        )
        status_code = 500
        return JsonResponse(
            {
                "status": status_code,
                "title": GENERIC_ERROR_TITLE,
                "detail": str(exception) if settings.DEBUG else GENERIC_ERROR_DETAIL,
            },
            status=status_code,
        )
