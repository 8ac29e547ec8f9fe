from django.contrib import admin

from bookings.models import Business, Event, EventTableSection, TableBooking


class EventTableSectionInline(admin.TabularInline):
    model = EventTableSection
    extra = 1


@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "slug"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "business", "event_date", "location"]
    list_filter = ["business"]
    search_fields = ["title", "location"]
    inlines = [EventTableSectionInline]


@admin.register(TableBooking)
class TableBookingAdmin(admin.ModelAdmin):
    list_display = ["order_id", "event", "section", "table_number", "amount", "status"]
    list_filter = ["status", "event__business"]
    search_fields = ["order_id", "customer_email", "customer_name"]
