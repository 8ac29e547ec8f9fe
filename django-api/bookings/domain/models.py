"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, time

from bookings.domain.value_objects import BookingId, Money, OrderId

UNKNOWN_SECTION = "Unknown Section"


@dataclass(frozen=True)
class EventInfo:
    """Event fields shown on a checkout confirmation."""

    title: str
    event_date: date | None
    event_time: time | None
    location: str | None
    image_url: str | None


@dataclass(frozen=True)
class TableBooking:
    """Domain representation of one booked table."""

    id: BookingId
    order_id: OrderId
    event: EventInfo | None
    section_name: str | None
    table_number: str | None
    amount: Money
    customer_name: str
    customer_email: str


@dataclass(frozen=True)
class OrderSummary:
    """Everything the confirmation page needs about one order."""

    order_id: OrderId
    booking_ids: tuple[BookingId, ...]
    event: EventInfo | None
    section_summary: str
    table_numbers: tuple[str | None, ...]
    total_tables: int
    total_amount: Money
    customer_name: str
    customer_email: str

    @classmethod
    def from_bookings(cls, order_id: OrderId, bookings: list[TableBooking]) -> "OrderSummary":
        """Reduce an order's bookings into one summary.

        The first booking is representative for event and customer fields.
        Sections are listed as ``"{count}x {name}"`` in the order they are
        first seen.
        """
        if not bookings:
            raise ValueError("An order summary needs at least one booking")

        first = bookings[0]
        section_counts: dict[str, int] = {}
        total = Money.zero()
        for booking in bookings:
            name = booking.section_name or UNKNOWN_SECTION
            section_counts[name] = section_counts.get(name, 0) + 1
            total = total + booking.amount

        return cls(
            order_id=order_id,
            booking_ids=tuple(b.id for b in bookings),
            event=first.event,
            section_summary=", ".join(f"{count}x {name}" for name, count in section_counts.items()),
            table_numbers=tuple(b.table_number for b in bookings),
            total_tables=len(bookings),
            total_amount=total,
            customer_name=first.customer_name,
            customer_email=first.customer_email,
        )


@dataclass(frozen=True)
class StoredFile:
    """A file persisted to object storage."""

    path: str
    url: str
