"""DRF exception handler mapping domain errors to HTTP responses.

Unexpected exceptions are logged with their traceback and answered with a
generic 500 so provider or database error text never reaches a client.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import DomainError, ErrorCode, TooManyAttemptsError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

STATUS_BY_CODE = {
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_UPLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOO_MANY_ATTEMPTS: status.HTTP_429_TOO_MANY_REQUESTS,
}


def domain_error_response(error: DomainError) -> Response:
    body = {"error": error.message, "code": error.code.value}
    headers = None
    if isinstance(error, TooManyAttemptsError):
        body["retryAfter"] = error.reset_in
        headers = {"Retry-After": str(error.reset_in)}
    return Response(body, status=STATUS_BY_CODE[error.code], headers=headers)


def api_exception_handler(exc: Exception, context: dict) -> Response:
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", type(view).__name__ if view else "unknown view"
    )
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
