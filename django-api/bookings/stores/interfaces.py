"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from bookings.domain import OrderId, StoredFile, TableBooking


class BookingStore(ABC):
    """Interface for table booking persistence operations."""

    @abstractmethod
    def list_bookings_for_order(self, order_id: OrderId) -> list[TableBooking]:
        """Return all bookings of an order, joined with section and event, oldest first."""
        ...


class FileStore(ABC):
    """Interface for public object storage."""

    @abstractmethod
    def save(self, path: str, content: BinaryIO, content_type: str) -> StoredFile:
        """Persist ``content`` at ``path`` and return its public location."""
        ...
