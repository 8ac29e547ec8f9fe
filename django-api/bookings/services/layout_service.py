"""Venue layout (floor plan) uploads."""

import logging
import time
from typing import BinaryIO
from uuid import UUID

from django.conf import settings

from bookings.domain import StoredFile
from bookings.domain.errors import InvalidUploadError
from bookings.stores.interfaces import FileStore

logger = logging.getLogger(__name__)

LAYOUT_PREFIX = "venue-layouts"


class VenueLayoutService:
    def __init__(self, store: FileStore) -> None:
        self._store = store

    def upload(
        self,
        business_id: str | None,
        file: BinaryIO | None,
        *,
        filename: str,
        content_type: str,
        size: int,
    ) -> StoredFile:
        """Validate and store a floor plan under a per-business, timestamped path.

        Raises:
            InvalidUploadError: On missing input, unsupported type or oversize file.
        """
        if file is None or not business_id:
            raise InvalidUploadError("Missing file or business ID")
        if content_type not in settings.VENUE_LAYOUT_CONTENT_TYPES:
            raise InvalidUploadError("File must be a JPEG, PNG, WebP image or PDF")
        if size > settings.VENUE_LAYOUT_MAX_BYTES:
            limit_mb = settings.VENUE_LAYOUT_MAX_BYTES // (1024 * 1024)
            raise InvalidUploadError(f"File size must be less than {limit_mb}MB")
        try:
            business = UUID(business_id)
        except ValueError:
            raise InvalidUploadError("Invalid business ID")

        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if not extension.isalnum():
            extension = "bin"
        path = f"{LAYOUT_PREFIX}/{business}-venue-{int(time.time() * 1000)}.{extension}"
        stored = self._store.save(path, file, content_type)
        logger.info("Stored venue layout for business %s at %s", business_id, stored.path)
        return stored
