"""Shared test fixtures for the bookings app."""

from collections.abc import Iterator

import pytest
import responses
from django.conf import settings

from events.models import Event
from users.models import CustomUser


MEMBER_PASSWORD = "correct-horse-battery"  # noqa: S105


@pytest.fixture()
def event() -> Event:
    """Create an active event open for bookings."""
    return Event.objects.create(
        name="Garden Party",
        slug="garden-party",
        location="Community Garden",
    )


@pytest.fixture()
def member() -> CustomUser:
    """Create a signed-up member."""
    return CustomUser.objects.create_user(
        email="member@example.com",
        password=MEMBER_PASSWORD,
        first_name="Ada",
        last_name="Lovelace",
    )


@pytest.fixture()
def staff_user() -> CustomUser:
    """Create a staff member who may see all bookings."""
    return CustomUser.objects.create_user(
        email="staff@example.com",
        password=MEMBER_PASSWORD,
        is_staff=True,
    )


@pytest.fixture()
def api_contacts_url() -> str:
    """Return the first contact endpoint tried for the configured base URL."""
    return f"{settings.MEMBERBASE_BASE_URL}/api/contacts"


@pytest.fixture()
def contacts_url() -> str:
    """Return the fallback contact endpoint for the configured base URL."""
    return f"{settings.MEMBERBASE_BASE_URL}/contacts"


@pytest.fixture()
def memberbase_api() -> Iterator[responses.RequestsMock]:
    """Intercept all outgoing Memberbase calls."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture()
def memberbase_created(
    memberbase_api: responses.RequestsMock,
    api_contacts_url: str,
) -> responses.RequestsMock:
    """Memberbase accepting every contact on the first endpoint."""
    memberbase_api.add(
        responses.POST,
        api_contacts_url,
        json={"data": {"id": "contact-42"}},
        status=201,
    )
    return memberbase_api
