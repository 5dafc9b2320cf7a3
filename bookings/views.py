"""
Views for submitting bookings and listing them for staff.

``submit_booking`` handles the form on the event page. It persists the booking first, then
mirrors the booker into Memberbase, reporting the outcome as a flash message. HTMX requests get
the booking-form fragment back instead of a full page or redirect.
"""

from typing import Any
from uuid import UUID

import structlog
from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.db import DatabaseError, transaction
from django.db.models import Q
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET, require_POST

from events.models import Event
from utils.email_utils import loggable_email
from utils.url import add_query_param

from .forms import BookingForm
from .models import EventBooking
from .services import DuplicateBookingError, create_booking, sync_booking_to_crm


logger = structlog.get_logger(__name__)

EVENT_TEMPLATE = "events/event_detail.html"
BOOKING_FORM_FRAGMENT = f"{EVENT_TEMPLATE}#booking-form"

MSG_LOGIN_REQUIRED = _("You must be logged in to book an event.")
MSG_FORM_INVALID = _("Please correct the errors in the form.")
MSG_ALREADY_BOOKED = _("You have already booked this event.")
MSG_CONFIRMED = _("Your booking has been confirmed! A confirmation will be sent to your email.")
MSG_CONFIRMED_CRM_ISSUE = _(
    "Your booking has been confirmed! However, there was an issue syncing with our CRM system.",
)
MSG_DATABASE_ERROR = _("There was an error processing your booking. Please try again.")
MSG_UNEXPECTED_ERROR = _("An unexpected error occurred. Please try again later.")


def booking_form_context(
    request: HttpRequest,
    event: Event,
    form: BookingForm | None = None,
) -> dict[str, Any]:
    """Build the template context for the booking part of the event page."""
    context: dict[str, Any] = {
        "booking_form": None,
        "already_booked": False,
        "booking_url": reverse("booking_submit", args=[event.key]),
        "login_url": add_query_param(reverse("account_login"), "next", event.get_absolute_url()),
    }
    user = request.user
    if user.is_authenticated:
        context["already_booked"] = EventBooking.objects.filter(
            Q(member=user) | Q(booker_email__iexact=user.email),
            event=event,
        ).exists()
        context["booking_form"] = form or BookingForm(
            initial={"name": user.full_name, "email": user.email},
        )
    return context


def render_event_page(
    request: HttpRequest,
    event: Event,
    form: BookingForm | None = None,
) -> HttpResponse:
    """Render the event page, or only its booking form for HTMX requests."""
    template = BOOKING_FORM_FRAGMENT if request.headers.get("HX-Request") else EVENT_TEMPLATE
    context = {"event": event, "object": event}
    context.update(booking_form_context(request, event, form))
    return render(request, template, context)


def back_to_event(request: HttpRequest, event: Event) -> HttpResponse:
    """Redirect to the event page, or re-render the booking form for HTMX requests."""
    if request.headers.get("HX-Request"):
        return render_event_page(request, event)
    return redirect(event)


@require_POST
@transaction.non_atomic_requests
def submit_booking(request: HttpRequest, event_key: UUID) -> HttpResponse:
    """
    Book ``event_key`` for the signed-in member.

    The booking is saved before Memberbase is called. A failed CRM sync still confirms the
    booking, with a warning.
    """
    event = get_object_or_404(Event, key=event_key, is_active=True)

    if not request.user.is_authenticated:
        messages.error(request, MSG_LOGIN_REQUIRED)
        return back_to_event(request, event)

    form = BookingForm(request.POST)
    if not form.is_valid():
        messages.error(request, MSG_FORM_INVALID)
        return render_event_page(request, event, form)

    data = form.cleaned_data
    logged_email = loggable_email(data["email"])
    logger.info("Processing booking", event_key=str(event.key), email=logged_email)

    try:
        booking = create_booking(
            event=event,
            member=request.user,
            name=data["name"],
            email=data["email"],
            note=data["note"],
        )
        result = sync_booking_to_crm(booking)
    except DuplicateBookingError:
        logger.info("Duplicate booking refused", event_key=str(event.key), email=logged_email)
        messages.error(request, MSG_ALREADY_BOOKED)
        return back_to_event(request, event)
    except DatabaseError:
        logger.exception("Database error while saving booking", event_key=str(event.key))
        messages.error(request, MSG_DATABASE_ERROR)
        return render_event_page(request, event, form)
    except Exception:
        logger.exception("Unexpected error while processing booking", event_key=str(event.key))
        messages.error(request, MSG_UNEXPECTED_ERROR)
        return render_event_page(request, event, form)

    if result.success:
        messages.success(request, MSG_CONFIRMED)
    else:
        messages.success(request, MSG_CONFIRMED_CRM_ISSUE)
    return back_to_event(request, event)


@require_GET
@staff_member_required
def event_bookings(request: HttpRequest, event_key: UUID) -> HttpResponse:
    """Return the bookings of an event as JSON, newest first."""
    del request
    try:
        bookings = [booking.as_json() for booking in EventBooking.objects.for_event(event_key)]
    except DatabaseError:
        logger.exception("Error retrieving bookings", event_key=str(event_key))
        return HttpResponse(_("Error retrieving bookings"), status=500)
    return JsonResponse(bookings, safe=False)
