"""Tests for the event list and event detail pages."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import pytest
from django.urls import reverse
from model_bakery import baker

from bookings.models import EventBooking
from events.models import Event
from users.models import CustomUser


if TYPE_CHECKING:
    from django.test.client import Client


@pytest.mark.django_db
class TestEventListView:
    """Tests for EventListView."""

    def test_lists_active_events(self, client: Client, event: Event) -> None:
        """Active events are listed, inactive ones are not."""
        baker.make(Event, name="Closed Meeting", slug="closed", is_active=False)

        response = client.get(reverse("event_list"))

        assert response.status_code == HTTPStatus.OK
        assert list(response.context["events"]) == [event]
        content = response.content.decode()
        assert "Garden Party" in content
        assert "Closed Meeting" not in content

    def test_empty(self, client: Client) -> None:
        """An empty list says so."""
        response = client.get(reverse("event_list"))
        assert "no events open for booking" in response.content.decode()

    def test_nav_sign_in_link_returns_here(self, client: Client) -> None:
        """Anonymous visitors get a sign-in link back to the page they are on."""
        response = client.get(reverse("event_list"))
        assert response.context["sign_in_url"] in response.content.decode()
        assert response.context["sign_in_url"].startswith(reverse("account_login") + "?next=")

    def test_home_redirects_to_list(self, client: Client) -> None:
        """The site root points at the event list."""
        response = client.get("/")
        assert response.status_code == HTTPStatus.FOUND
        assert response.headers["Location"] == reverse("event_list")


@pytest.mark.django_db
class TestEventDetailView:
    """Tests for EventDetailView."""

    def test_anonymous_sees_sign_in_link(self, client: Client, event: Event) -> None:
        """Visitors get a sign-in link that returns to the event."""
        response = client.get(event.get_absolute_url())

        assert response.status_code == HTTPStatus.OK
        assert response.context["booking_form"] is None
        login_url = response.context["login_url"]
        assert login_url.startswith(reverse("account_login") + "?next=")
        assert "garden-party" in login_url
        content = response.content.decode()
        assert "Tea and cake in the garden." in content
        assert "Sign in</a> to book this event" in content

    def test_member_gets_prefilled_form(
        self,
        client: Client,
        event: Event,
        member: CustomUser,
    ) -> None:
        """Members see the form prefilled with their name and email."""
        client.force_login(member)

        response = client.get(event.get_absolute_url())

        form = response.context["booking_form"]
        assert form.initial == {"name": "Ada Lovelace", "email": "member@example.com"}
        assert response.context["already_booked"] is False
        content = response.content.decode()
        assert reverse("booking_submit", args=[event.key]) in content
        assert 'hx-post="' in content

    def test_member_already_booked(
        self,
        client: Client,
        event: Event,
        member: CustomUser,
    ) -> None:
        """Members who booked see that instead of the form."""
        baker.make(EventBooking, event=event, booker_email="member@example.com")
        client.force_login(member)

        response = client.get(event.get_absolute_url())

        assert response.context["already_booked"] is True
        assert "You have already booked this event." in response.content.decode()

    def test_inactive_event_not_found(self, client: Client) -> None:
        """Inactive events have no public page."""
        event = baker.make(Event, name="Closed", slug="closed", is_active=False)
        response = client.get(event.get_absolute_url())
        assert response.status_code == HTTPStatus.NOT_FOUND

    def test_unknown_slug_not_found(self, client: Client) -> None:
        """Unknown slugs are not found."""
        response = client.get(reverse("event_detail", kwargs={"slug": "nope"}))
        assert response.status_code == HTTPStatus.NOT_FOUND
