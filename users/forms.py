"""
Forms for member management.

Staff create members in the admin with an initial password; members edit their own names on the
profile page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from django import forms
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from django.utils.translation import gettext_lazy as _

from .models import CustomUser


if TYPE_CHECKING:
    from django_stubs_ext import StrOrPromise


class MemberCreationForm(UserCreationForm[CustomUser]):
    """Admin form for creating a member with a password."""

    class Meta:
        """Meta class for MemberCreationForm."""

        model = CustomUser
        fields = ("email", "first_name", "last_name")

    def clean_email(self) -> str:
        """Store emails lower-cased."""
        return self.cleaned_data["email"].strip().lower()


class MemberChangeForm(UserChangeForm[CustomUser]):
    """Admin form for updating a member."""

    class Meta:
        """Meta class for MemberChangeForm."""

        model = CustomUser
        fields = (
            "email",
            "password",
            "first_name",
            "last_name",
            "display_name",
            "is_active",
            "is_staff",
            "is_superuser",
        )

    def clean_email(self) -> str:
        """Store emails lower-cased."""
        return self.cleaned_data["email"].strip().lower()


class ProfileForm(forms.ModelForm[CustomUser]):
    """Form for members to edit their names."""

    class Meta:
        """Metadata for ProfileForm."""

        model = CustomUser
        fields = ("first_name", "last_name", "display_name")
        help_texts: ClassVar[dict[str, StrOrPromise]] = {
            "display_name": _(
                "Used to prefill booking forms when first and last name are empty.",
            ),
        }
