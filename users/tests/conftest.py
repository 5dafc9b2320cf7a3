"""Shared test fixtures for the users app."""

from typing import Any

import pytest
from django.contrib.auth import get_user_model

from users.models import CustomUser


MEMBER_PASSWORD = "correct-horse-battery"  # noqa: S105


@pytest.fixture()
def user_model() -> type[Any]:
    """Return the user model being used by the application."""
    return get_user_model()


@pytest.fixture()
def member() -> CustomUser:
    """Create a member who can sign in with a password."""
    return CustomUser.objects.create_user(
        email="member@example.com",
        password=MEMBER_PASSWORD,
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
