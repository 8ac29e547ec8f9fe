"""Domain errors for the bookings module."""

from core.errors import DomainError, ErrorCode


class BookingNotFoundError(DomainError):
    """Raised when no booking carries the requested order id."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.order_id = order_id


class InvalidUploadError(DomainError):
    """Raised when an uploaded venue layout is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_UPLOAD, message=message)
