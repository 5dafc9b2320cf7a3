"""Admin interface for events, including the per-event bookings panel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from django.contrib import admin
from django.contrib.admin.utils import unquote
from django.db.models import Count, QuerySet
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.urls import URLPattern, path, reverse
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from bookings.models import EventBooking

from .models import Event


if TYPE_CHECKING:
    from collections.abc import Sequence


@admin.register(Event)
class EventAdmin(admin.ModelAdmin[Event]):
    """Admin configuration for the Event model."""

    list_display = (
        "name",
        "slug",
        "start_time",
        "location",
        "is_active",
        "booking_count",
        "bookings_link",
    )
    list_filter = ("is_active", "start_time")
    search_fields = ("name", "slug", "location")
    prepopulated_fields: ClassVar[dict[str, Sequence[str]]] = {"slug": ("name",)}
    readonly_fields = ("key",)
    fieldsets: ClassVar[list[Any]] = [
        (
            None,
            {
                "fields": (
                    "name",
                    "slug",
                    "key",
                    "is_active",
                ),
            },
        ),
        (
            _("Details"),
            {"fields": ("start_time", "location", "description")},
        ),
    ]

    def get_queryset(self, request: HttpRequest) -> QuerySet[Event]:
        """Annotate events with their number of bookings."""
        return super().get_queryset(request).annotate(bookings_total=Count("bookings"))

    def get_urls(self) -> list[URLPattern]:
        """Add the bookings panel in front of the default admin URLs."""
        custom_urls = [
            path(
                "<path:object_id>/bookings/",
                self.admin_site.admin_view(self.bookings_view),
                name="events_event_bookings",
            ),
        ]
        return custom_urls + super().get_urls()

    @admin.display(description=_("Bookings"), ordering="bookings_total")
    def booking_count(self, obj: Any) -> int:
        """Show how many bookings the event has."""
        return obj.bookings_total

    @admin.display(description=_("Booking list"))
    def bookings_link(self, obj: Event) -> str:
        """Link to the bookings panel of the event."""
        url = reverse("admin:events_event_bookings", args=[obj.pk])
        return format_html('<a href="{}">{}</a>', url, _("View bookings"))

    def bookings_view(self, request: HttpRequest, object_id: str) -> HttpResponse:
        """List the event's bookings, newest first."""
        event = self.get_object(request, unquote(object_id))
        if event is None:
            raise Http404(_("Event not found"))
        context = {
            **self.admin_site.each_context(request),
            "opts": self.model._meta,  # noqa: SLF001
            "title": _("Bookings for %(event)s") % {"event": event.name},
            "event": event,
            "bookings": EventBooking.objects.for_event(event.key).select_related("member"),
            "json_url": reverse("event_bookings", args=[event.key]),
        }
        return render(request, "admin/events/event/bookings.html", context)
