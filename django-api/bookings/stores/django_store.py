"""Django implementations of the bookings stores."""

from typing import BinaryIO

from django.core.files.storage import Storage, default_storage

from bookings import models
from bookings.domain import BookingId, EventInfo, Money, OrderId, StoredFile, TableBooking
from bookings.stores.interfaces import BookingStore, FileStore


class DjangoBookingStore(BookingStore):
    """Database-backed booking store using the Django ORM."""

    def list_bookings_for_order(self, order_id: OrderId) -> list[TableBooking]:
        rows = (
            models.TableBooking.objects.filter(order_id=order_id.value)
            .select_related("event", "section")
            .order_by("created_at", "id")
        )
        return [_to_domain(row) for row in rows]


class DjangoFileStore(FileStore):
    """Object storage through Django's storage API (filesystem, S3...)."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or default_storage

    def save(self, path: str, content: BinaryIO, content_type: str) -> StoredFile:
        name = self._storage.save(path, content)
        return StoredFile(path=name, url=self._storage.url(name))


def _to_domain(row: models.TableBooking) -> TableBooking:
    event = None
    if row.event_id is not None:
        event = EventInfo(
            title=row.event.title,
            event_date=row.event.event_date,
            event_time=row.event.event_time,
            location=row.event.location,
            image_url=row.event.image_url,
        )
    return TableBooking(
        id=BookingId(value=row.id),
        order_id=OrderId(value=row.order_id),
        event=event,
        section_name=row.section.section_name if row.section_id else None,
        table_number=row.table_number,
        amount=Money.from_optional(row.amount),
        customer_name=row.customer_name,
        customer_email=row.customer_email,
    )
