"""Tests for the EventBooking model and queryset."""

from datetime import timedelta

import pytest
from django.db import IntegrityError
from django.utils import timezone
from model_bakery import baker

from bookings.models import EventBooking
from events.models import Event
from users.models import CustomUser


@pytest.mark.django_db
class TestEventBooking:
    """Tests for EventBooking."""

    def test_str(self, event: Event) -> None:
        """The string form names the booker and the event."""
        booking = baker.make(EventBooking, event=event, booker_name="Ada Lovelace")
        assert str(booking) == "Ada Lovelace - Garden Party"

    def test_references_event_key(self, event: Event) -> None:
        """Bookings store the event's key, not its primary key."""
        booking = baker.make(EventBooking, event=event)
        assert booking.event_id == event.key

    def test_unique_email_per_event(self, event: Event) -> None:
        """The database refuses a second booking with the same email."""
        baker.make(EventBooking, event=event, booker_email="ada@example.com")
        with pytest.raises(IntegrityError):
            baker.make(EventBooking, event=event, booker_email="ada@example.com")

    def test_as_json(self, event: Event) -> None:
        """as_json exposes the columns with an empty contact id as None."""
        booking = baker.make(
            EventBooking,
            event=event,
            booker_name="Ada Lovelace",
            booker_email="ada@example.com",
            note="",
            api_response="API Error: 500 Internal Server Error",
        )

        data = booking.as_json()

        assert data["id"] == booking.pk
        assert data["event_key"] == str(event.key)
        assert data["booker_name"] == "Ada Lovelace"
        assert data["api_contact_id"] is None
        assert data["api_success"] is False
        assert data["created_at"] == booking.created_at.isoformat()

    def test_deleting_member_keeps_booking(self, event: Event, member: CustomUser) -> None:
        """Bookings survive the removal of the member account."""
        booking = baker.make(EventBooking, event=event, member=member)
        member.delete()
        booking.refresh_from_db()
        assert booking.member is None


@pytest.mark.django_db
class TestEventBookingQuerySet:
    """Tests for EventBookingQuerySet."""

    def test_for_event_newest_first(self, event: Event) -> None:
        """for_event returns only that event's bookings, newest first."""
        now = timezone.now()
        older = baker.make(EventBooking, event=event, created_at=now - timedelta(days=1))
        newer = baker.make(EventBooking, event=event, created_at=now)
        other = baker.make(Event, name="Museum Visit", slug="museum-visit")
        baker.make(EventBooking, event=other)

        assert list(EventBooking.objects.for_event(event.key)) == [newer, older]

    def test_for_email_ignores_case(self, event: Event) -> None:
        """for_email matches addresses case-insensitively."""
        booking = baker.make(EventBooking, event=event, booker_email="ada@example.com")
        assert list(EventBooking.objects.for_email(event, " ADA@Example.com ")) == [booking]

    def test_crm_failed(self, event: Event) -> None:
        """crm_failed returns bookings not yet mirrored into the CRM."""
        failed = baker.make(EventBooking, event=event, api_success=False)
        baker.make(EventBooking, event=event, api_success=True)
        assert list(EventBooking.objects.crm_failed()) == [failed]
