from django.urls import path

from bookings.handlers import TableBookingSummaryView, VenueLayoutUploadView

urlpatterns = [
    path(
        "checkout/get-table-booking",
        TableBookingSummaryView.as_view(),
        name="checkout-table-booking",
    ),
    path("upload/venue-layout", VenueLayoutUploadView.as_view(), name="venue-layout-upload"),
]
