"""Tests for the member admin interface."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import pytest
from django.contrib.admin import AdminSite
from django.urls import reverse
from model_bakery import baker

from bookings.models import EventBooking
from users.admin import CustomUserAdmin
from users.models import CustomUser


if TYPE_CHECKING:
    from django.test.client import Client


@pytest.mark.django_db
class TestCustomUserAdmin:
    """Tests for CustomUserAdmin views and actions."""

    def test_changelist_shows_booking_count(self, client: Client, superuser: CustomUser) -> None:
        """The member list renders with booking counts."""
        member = baker.make(CustomUser, email="booker@example.com")
        baker.make(EventBooking, member=member, _quantity=2)
        client.force_login(superuser)
        response = client.get(reverse("admin:users_customuser_changelist"))
        assert response.status_code == HTTPStatus.OK
        assert "booker@example.com" in response.content.decode()

    def test_add_member(self, client: Client, superuser: CustomUser) -> None:
        """Staff can create a member with a password and a verified email."""
        client.force_login(superuser)
        response = client.post(
            reverse("admin:users_customuser_add"),
            {
                "email": "New.Member@Example.com",
                "first_name": "New",
                "last_name": "Member",
                "password1": "a-long-unique-passphrase",
                "password2": "a-long-unique-passphrase",
            },
        )
        assert response.status_code == HTTPStatus.FOUND
        user = CustomUser.objects.get(email="new.member@example.com")
        assert user.check_password("a-long-unique-passphrase")
        assert user.emailaddress_set.filter(verified=True, primary=True).exists()

    def test_change_view(self, client: Client, superuser: CustomUser) -> None:
        """The change page loads for an existing member."""
        member = baker.make(CustomUser, email="edit@example.com")
        client.force_login(superuser)
        response = client.get(reverse("admin:users_customuser_change", args=[member.pk]))
        assert response.status_code == HTTPStatus.OK

    def test_deactivate_members(self, client: Client, superuser: CustomUser) -> None:
        """The deactivate action turns off selected members."""
        member = baker.make(CustomUser, email="active@example.com", is_active=True)
        client.force_login(superuser)
        client.post(
            reverse("admin:users_customuser_changelist"),
            {"action": "deactivate_members", "_selected_action": [member.pk]},
        )
        member.refresh_from_db()
        assert member.is_active is False

    def test_cannot_deactivate_self(self, client: Client, superuser: CustomUser) -> None:
        """Staff cannot deactivate their own account."""
        client.force_login(superuser)
        client.post(
            reverse("admin:users_customuser_changelist"),
            {"action": "deactivate_members", "_selected_action": [superuser.pk]},
        )
        superuser.refresh_from_db()
        assert superuser.is_active is True

    def test_activate_members(self, client: Client, superuser: CustomUser) -> None:
        """The activate action turns on selected members."""
        member = baker.make(CustomUser, email="inactive@example.com", is_active=False)
        client.force_login(superuser)
        client.post(
            reverse("admin:users_customuser_changelist"),
            {"action": "activate_members", "_selected_action": [member.pk]},
        )
        member.refresh_from_db()
        assert member.is_active is True

    def test_last_login_never(self) -> None:
        """Members who never signed in show 'Never'."""
        member = baker.make(CustomUser, email="never@example.com", last_login=None)
        admin_instance = CustomUserAdmin(CustomUser, AdminSite())
        assert admin_instance.last_login_display(member) == "Never"
