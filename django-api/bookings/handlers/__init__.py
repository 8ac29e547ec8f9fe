from bookings.handlers.views import TableBookingSummaryView, VenueLayoutUploadView

__all__ = ["TableBookingSummaryView", "VenueLayoutUploadView"]
