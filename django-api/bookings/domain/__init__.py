from bookings.domain.models import EventInfo, OrderSummary, StoredFile, TableBooking
from bookings.domain.value_objects import BookingId, Money, OrderId

__all__ = [
    "EventInfo",
    "OrderSummary",
    "StoredFile",
    "TableBooking",
    "BookingId",
    "Money",
    "OrderId",
]
