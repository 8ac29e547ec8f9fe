"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class OrderSummarySerializer(serializers.Serializer):
    """Serializer for the OrderSummary domain model (checkout confirmation)."""

    success = serializers.SerializerMethodField()
    type = serializers.SerializerMethodField()
    bookingIds = serializers.SerializerMethodField()
    eventTitle = serializers.SerializerMethodField()
    eventDate = serializers.SerializerMethodField()
    eventTime = serializers.SerializerMethodField()
    eventLocation = serializers.SerializerMethodField()
    eventImageUrl = serializers.SerializerMethodField()
    sectionName = serializers.CharField(source="section_summary")
    tableNumbers = serializers.ListField(source="table_numbers", child=serializers.CharField(allow_null=True))
    totalTables = serializers.IntegerField(source="total_tables")
    amount = serializers.DecimalField(
        source="total_amount.amount", max_digits=12, decimal_places=2, coerce_to_string=False
    )
    customerName = serializers.CharField(source="customer_name")
    customerEmail = serializers.CharField(source="customer_email")
    orderId = serializers.CharField(source="order_id.value")

    def get_success(self, summary) -> bool:
        return True

    def get_type(self, summary) -> str:
        return "table_booking"

    def get_bookingIds(self, summary) -> list[str]:
        return [str(booking_id.value) for booking_id in summary.booking_ids]

    def get_eventTitle(self, summary) -> str:
        return summary.event.title if summary.event and summary.event.title else "Event"

    def get_eventDate(self, summary) -> str | None:
        if summary.event is None or summary.event.event_date is None:
            return None
        return summary.event.event_date.isoformat()

    def get_eventTime(self, summary) -> str | None:
        if summary.event is None or summary.event.event_time is None:
            return None
        return summary.event.event_time.isoformat()

    def get_eventLocation(self, summary) -> str | None:
        return summary.event.location if summary.event else None

    def get_eventImageUrl(self, summary) -> str | None:
        return summary.event.image_url if summary.event else None


class StoredFileSerializer(serializers.Serializer):
    url = serializers.CharField()
