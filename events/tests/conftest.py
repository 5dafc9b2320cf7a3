"""Shared test fixtures for the events app."""

import pytest

from events.models import Event
from users.models import CustomUser


@pytest.fixture()
def event() -> Event:
    """Create an active event."""
    return Event.objects.create(
        name="Garden Party",
        slug="garden-party",
        description="Tea and cake in the garden.",
        location="Community Garden",
    )


@pytest.fixture()
def member() -> CustomUser:
    """Create a member."""
    return CustomUser.objects.create_user(
        email="member@example.com",
        password="correct-horse-battery",  # noqa: S106
        first_name="Ada",
        last_name="Lovelace",
    )


@pytest.fixture()
def superuser() -> CustomUser:
    """Create a superuser for admin access."""
    return CustomUser.objects.create_superuser(
        email="admin@example.com",
        password="password",
    )
