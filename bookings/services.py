"""
Booking workflow: persist a booking, then mirror the booker into Memberbase.

The booking is committed before the CRM is called, so a CRM outage never loses a booking. The
CRM outcome is written back onto the booking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import IntegrityError, transaction

from utils.email_utils import loggable_email

from .memberbase import ContactSyncResult, MemberbaseClient
from .models import MAX_CONTACT_ID_LENGTH, EventBooking


if TYPE_CHECKING:
    from events.models import Event
    from users.models import CustomUser


logger = structlog.get_logger(__name__)


class DuplicateBookingError(Exception):
    """Exception raised when an email already holds a booking for an event."""

    def __init__(self, event: Event, email: str) -> None:
        """
        Initialize the DuplicateBookingError.

        Args:
            event: The event that was already booked
            email: The booker's email address

        """
        self.event = event
        self.email = email
        super().__init__(f"{email} has already booked {event}")


def create_booking(
    *,
    event: Event,
    member: CustomUser | None,
    name: str,
    email: str,
    note: str = "",
) -> EventBooking:
    """
    Persist a booking for ``event``.

    Raises:
        DuplicateBookingError: If ``email`` already booked ``event``

    """
    if EventBooking.objects.for_email(event, email).exists():
        raise DuplicateBookingError(event, email)

    try:
        with transaction.atomic():
            booking = EventBooking.objects.create(
                event=event,
                member=member,
                booker_name=name,
                booker_email=email,
                note=note,
            )
    except IntegrityError as exc:
        # Lost a race against a concurrent submission for the same email
        if EventBooking.objects.for_email(event, email).exists():
            raise DuplicateBookingError(event, email) from exc
        raise

    logger.info(
        "Booking saved",
        booking_id=booking.pk,
        event_key=str(event.key),
        email=loggable_email(email),
    )
    return booking


def sync_booking_to_crm(
    booking: EventBooking,
    client: MemberbaseClient | None = None,
) -> ContactSyncResult:
    """Create the booker as a Memberbase contact and store the outcome on ``booking``."""
    client = client or MemberbaseClient.from_settings()
    result = client.create_contact(booking.booker_name, booking.booker_email)

    booking.api_success = result.success
    booking.api_contact_id = (result.contact_id or "")[:MAX_CONTACT_ID_LENGTH]
    booking.api_response = result.message
    booking.save(update_fields=["api_success", "api_contact_id", "api_response"])

    if result.success:
        logger.info(
            "Booking synced to Memberbase",
            booking_id=booking.pk,
            contact_id=result.contact_id,
        )
    else:
        logger.warning(
            "Booking saved but Memberbase sync failed",
            booking_id=booking.pk,
            message=result.message,
        )
    return result
