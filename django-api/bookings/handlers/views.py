"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from dataclasses import replace

from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.handlers.serializers import OrderSummarySerializer, StoredFileSerializer
from bookings.services.booking_service import BookingService
from bookings.services.layout_service import VenueLayoutService
from bookings.stores.django_store import DjangoBookingStore, DjangoFileStore


class TableBookingSummaryView(APIView):
    """Handler for GET /api/checkout/get-table-booking?orderId="""

    def get_service(self) -> BookingService:
        return BookingService(DjangoBookingStore())

    def get(self, request: Request) -> Response:
        summary = self.get_service().get_order_summary(request.query_params.get("orderId"))
        return Response(OrderSummarySerializer(summary).data)


class VenueLayoutUploadView(APIView):
    """Handler for POST /api/upload/venue-layout"""

    parser_classes = [MultiPartParser, FormParser]

    def get_service(self) -> VenueLayoutService:
        return VenueLayoutService(DjangoFileStore())

    def post(self, request: Request) -> Response:
        upload = request.FILES.get("file")
        stored = self.get_service().upload(
            request.data.get("businessId"),
            upload,
            filename=upload.name if upload else "",
            content_type=upload.content_type if upload else "",
            size=upload.size if upload else 0,
        )
        stored = replace(stored, url=request.build_absolute_uri(stored.url))
        return Response(StoredFileSerializer(stored).data)
