"""Domain errors for the accounts module."""

from core.errors import DomainError, ErrorCode


class InvalidCredentialsError(DomainError):
    """Raised for any failed admin login, whichever factor was wrong."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class InvalidOrExpiredTokenError(DomainError):
    """Raised for any unusable password reset token."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
            message="Invalid or expired reset link. Please request a new one.",
        )


class WeakPasswordError(DomainError):
    """Raised when a new password violates the strength policy."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.WEAK_PASSWORD, message=message)
