"""Booking form shown on the event page."""

from typing import ClassVar

from django import forms
from django.utils.translation import gettext_lazy as _

from .models import MAX_BOOKER_EMAIL_LENGTH, MAX_BOOKER_NAME_LENGTH, MAX_NOTE_LENGTH


class BookingForm(forms.Form):
    """Name, email and an optional note for a booking. The event comes from the URL."""

    name = forms.CharField(
        label=_("Full Name"),
        max_length=MAX_BOOKER_NAME_LENGTH,
        error_messages={
            "required": _("Please enter your full name"),
            "max_length": _("Name cannot exceed 200 characters"),
        },
    )
    email = forms.EmailField(
        label=_("Email Address"),
        max_length=MAX_BOOKER_EMAIL_LENGTH,
        error_messages={
            "required": _("Please enter your email address"),
            "invalid": _("Please enter a valid email address"),
            "max_length": _("Email cannot exceed 255 characters"),
        },
    )
    note = forms.CharField(
        label=_("Additional Notes (Optional)"),
        required=False,
        max_length=MAX_NOTE_LENGTH,
        widget=forms.Textarea(attrs={"rows": 4}),
        error_messages={
            "max_length": _("Note cannot exceed 1000 characters"),
        },
    )

    field_order: ClassVar[list[str]] = ["name", "email", "note"]

    def clean_email(self) -> str:
        """Store emails lower-cased so duplicate checks are exact."""
        return self.cleaned_data["email"].strip().lower()
