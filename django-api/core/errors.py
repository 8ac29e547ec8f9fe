"""Domain error codes shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_ID = "INVALID_ID"
    INVALID_UPLOAD = "INVALID_UPLOAD"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    TOO_MANY_ATTEMPTS = "TOO_MANY_ATTEMPTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRequestError(DomainError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_REQUEST, message=message)


class InvalidIdError(DomainError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, message: str = "Invalid ID format") -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message=message)


class UnauthorizedError(DomainError):
    """Raised when a protected route is called without a valid admin session."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Unauthorized")


class ForbiddenError(DomainError):
    """Same as UnauthorizedError, for routes that answer 403."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message="Unauthorized")


class TooManyAttemptsError(DomainError):
    """Raised when the rate limiter rejects an attempt."""

    def __init__(self, reset_in: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_ATTEMPTS,
            message="Too many requests. Please try again later.",
        )
        self.reset_in = reset_in
