"""Maps domain errors to HTTP responses.

Only the error code and the user-safe message are exposed.
"""

from typing import Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_UPDATED: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_DELETED: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_CREATED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """DRF EXCEPTION_HANDLER that understands DomainError."""
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        )
    return exception_handler(exc, context)
