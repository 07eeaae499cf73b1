"""Map domain and request errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Error bodies share one
shape: {"error": message, "code": CODE} plus "field" for domain validation
errors and "details" for malformed requests.
"""

import logging
from typing import Any

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from agenda.domain import DomainError, ErrorCode, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # Ids are generated server-side, so a collision is our fault.
    ErrorCode.EVENT_ALREADY_EXISTS: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    if isinstance(exc, DomainError):
        return _domain_error_response(exc, context)

    response = exception_handler(exc, context)
    if response is None:
        request = context.get("request")
        logger.error(
            "%s %s crashed: %s",
            getattr(request, "method", "-"),
            getattr(request, "path", "-"),
            exc,
            exc_info=exc,
        )
        return Response(
            {"error": "Internal server error", "code": "INTERNAL_ERROR"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error": "Invalid request",
            "code": "INVALID_REQUEST",
            "details": response.data,
        }
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {
            "error": str(response.data["detail"]),
            "code": str(getattr(exc, "default_code", "error")).upper(),
        }
    return response


def _domain_error_response(exc: DomainError, context: dict[str, Any]) -> Response:
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        request = context.get("request")
        logger.error(
            "%s %s failed: %s",
            getattr(request, "method", "-"),
            getattr(request, "path", "-"),
            exc,
            exc_info=exc,
        )

    body: dict[str, Any] = {"error": exc.message, "code": exc.code.value}
    if isinstance(exc, ValidationError):
        body["field"] = exc.field
    return Response(body, status=status_code)
