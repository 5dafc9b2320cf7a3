"""Bookings made by members for events, with the outcome of the CRM sync."""

from __future__ import annotations

from typing import Any, ClassVar

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from events.models import Event


MAX_BOOKER_NAME_LENGTH = 200
MAX_BOOKER_EMAIL_LENGTH = 255
MAX_NOTE_LENGTH = 1000
MAX_CONTACT_ID_LENGTH = 200


class EventBookingQuerySet(models.QuerySet):
    """Custom QuerySet for EventBooking."""

    def for_event(self, event_key: Any) -> EventBookingQuerySet:
        """Return the bookings of the event with ``event_key``, newest first."""
        return self.filter(event__key=event_key).order_by("-created_at", "-pk")

    def for_email(self, event: Event, email: str) -> EventBookingQuerySet:
        """Return bookings of ``event`` made with ``email`` (case-insensitive)."""
        return self.filter(event=event, booker_email__iexact=email.strip())

    def crm_failed(self) -> EventBookingQuerySet:
        """Return bookings whose contact could not be created in the CRM."""
        return self.filter(api_success=False)


class EventBooking(models.Model):
    """A member's booking for an event."""

    event = models.ForeignKey(
        Event,
        to_field="key",
        db_column="event_key",
        on_delete=models.CASCADE,
        related_name="bookings",
        help_text=_("The booked event"),
    )

    member = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
        help_text=_("Signed-in member who made the booking"),
    )

    booker_name = models.CharField(
        max_length=MAX_BOOKER_NAME_LENGTH,
        help_text=_("Full name of the person making the booking"),
    )

    booker_email = models.EmailField(
        max_length=MAX_BOOKER_EMAIL_LENGTH,
        help_text=_("Email address of the booker"),
    )

    note = models.TextField(
        max_length=MAX_NOTE_LENGTH,
        blank=True,
        default="",
        help_text=_("Optional notes or comments from the booker"),
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text=_("When the booking was created"),
    )

    api_contact_id = models.CharField(
        max_length=MAX_CONTACT_ID_LENGTH,
        blank=True,
        default="",
        help_text=_("Contact id returned by Memberbase (empty when the sync failed)"),
    )

    api_response = models.TextField(
        blank=True,
        default="",
        help_text=_("Outcome message of the Memberbase call"),
    )

    api_success = models.BooleanField(
        default=False,
        help_text=_("Whether the contact was created in Memberbase"),
    )

    objects = EventBookingQuerySet.as_manager()

    class Meta:
        """Metadata for the EventBooking model."""

        db_table = "event_bookings"
        ordering: ClassVar[list[str]] = ["-created_at"]
        verbose_name = _("Event booking")
        verbose_name_plural = _("Event bookings")
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["booker_email"], name="event_booking_email_idx"),
            models.Index(fields=["created_at"], name="event_booking_created_idx"),
        ]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["event", "booker_email"],
                name="unique_booking_per_event_email",
            ),
        ]

    def __str__(self) -> str:
        """Return the booker and the event."""
        return f"{self.booker_name} - {self.event}"

    def as_json(self) -> dict[str, Any]:
        """Return the booking as a JSON-serializable dict for the admin panel."""
        return {
            "id": self.pk,
            "event_key": str(self.event_id),
            "booker_name": self.booker_name,
            "booker_email": self.booker_email,
            "note": self.note,
            "created_at": self.created_at.isoformat(),
            "api_contact_id": self.api_contact_id or None,
            "api_response": self.api_response,
            "api_success": self.api_success,
        }
