"""Booking service - all checkout confirmation logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from bookings.domain import OrderId, OrderSummary
from bookings.domain.errors import BookingNotFoundError
from bookings.stores.interfaces import BookingStore
from core.errors import InvalidRequestError

logger = logging.getLogger(__name__)


class BookingService:
    """Service for order/booking lookups."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def get_order_summary(self, order_id: str | None) -> OrderSummary:
        """Return the aggregated summary of every table booked under an order.

        Raises:
            InvalidRequestError: If the order id is missing or blank.
            BookingNotFoundError: If no booking carries the order id.
        """
        try:
            order = OrderId.from_string(order_id)
        except ValueError:
            raise InvalidRequestError("Missing order ID")

        bookings = self._store.list_bookings_for_order(order)
        if not bookings:
            logger.info("No table bookings for order %s", order)
            raise BookingNotFoundError(order.value)

        return OrderSummary.from_bookings(order, bookings)
