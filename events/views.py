"""Public pages listing events and showing a single event with its booking form."""

from typing import Any

from django.db.models.query import QuerySet
from django.views.generic import DetailView, ListView

from bookings.views import booking_form_context

from .models import Event


class EventListView(ListView):
    """List the events that are open on the site, soonest first."""

    model = Event
    template_name = "events/event_list.html"
    context_object_name = "events"

    def get_queryset(self) -> QuerySet[Event]:
        """Return active events only."""
        return Event.objects.active()


class EventDetailView(DetailView):
    """
    Show an active event.

    Signed-in members get the booking form prefilled with their name and email, anonymous
    visitors a link to sign in and come back.
    """

    model = Event
    template_name = "events/event_detail.html"
    context_object_name = "event"

    def get_queryset(self) -> QuerySet[Event]:
        """Hide inactive events."""
        return Event.objects.filter(is_active=True)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        """Add the booking form state."""
        context = super().get_context_data(**kwargs)
        context.update(booking_form_context(self.request, self.object))
        return context
