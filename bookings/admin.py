"""Admin configuration for event bookings."""

from typing import ClassVar

from django.contrib import admin, messages
from django.db.models import QuerySet
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .memberbase import MemberbaseClient
from .models import EventBooking
from .services import sync_booking_to_crm


# Constants
NOTE_PREVIEW_LENGTH = 50


@admin.register(EventBooking)
class EventBookingAdmin(admin.ModelAdmin[EventBooking]):
    """Admin configuration for the EventBooking model."""

    list_display = (
        "booker_name",
        "booker_email",
        "event",
        "created_at",
        "api_success",
        "api_contact_id",
        "note_preview",
    )
    list_filter = ("api_success", "event", "created_at")
    search_fields = ("booker_name", "booker_email", "event__name", "api_contact_id")
    date_hierarchy = "created_at"
    list_select_related = ("event", "member")
    readonly_fields = ("created_at", "api_success", "api_contact_id", "api_response")
    raw_id_fields = ("member",)
    actions: ClassVar[list[str]] = ["retry_crm_sync"]

    fieldsets = (
        (None, {"fields": ("event", "member", "booker_name", "booker_email", "note")}),
        (
            _("Memberbase"),
            {"fields": ("api_success", "api_contact_id", "api_response", "created_at")},
        ),
    )

    @admin.display(description=_("Note"))
    def note_preview(self, obj: EventBooking) -> str:
        """Show the beginning of the booker's note."""
        if len(obj.note) > NOTE_PREVIEW_LENGTH:
            return f"{obj.note[:NOTE_PREVIEW_LENGTH]}..."
        return obj.note

    @admin.action(description=_("Retry CRM sync"))
    def retry_crm_sync(self, request: HttpRequest, queryset: QuerySet[EventBooking]) -> None:
        """Create the selected bookers as Memberbase contacts again."""
        client = MemberbaseClient.from_settings()
        synced = 0
        failed = 0
        for booking in queryset:
            if sync_booking_to_crm(booking, client=client).success:
                synced += 1
            else:
                failed += 1

        if synced:
            self.message_user(
                request,
                _("Synced %(count)d bookings to Memberbase.") % {"count": synced},
            )
        if failed:
            self.message_user(
                request,
                _("Memberbase sync failed for %(count)d bookings.") % {"count": failed},
                level=messages.WARNING,
            )
