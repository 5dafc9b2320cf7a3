"""Tests for the booking form."""

from bookings.forms import BookingForm


class TestBookingForm:
    """Tests for BookingForm validation."""

    def test_valid(self) -> None:
        """Name and email are enough, the note is optional."""
        form = BookingForm(data={"name": "Ada Lovelace", "email": "ada@example.com"})
        assert form.is_valid()
        assert form.cleaned_data["note"] == ""

    def test_email_is_lower_cased(self) -> None:
        """Emails are normalised to lower case."""
        form = BookingForm(data={"name": "Ada", "email": "  Ada@Example.COM "})
        assert form.is_valid()
        assert form.cleaned_data["email"] == "ada@example.com"

    def test_required_fields(self) -> None:
        """Missing name and email produce friendly messages."""
        form = BookingForm(data={"name": "", "email": ""})
        assert not form.is_valid()
        assert form.errors["name"] == ["Please enter your full name"]
        assert form.errors["email"] == ["Please enter your email address"]

    def test_invalid_email(self) -> None:
        """Malformed addresses are rejected."""
        form = BookingForm(data={"name": "Ada", "email": "not-an-email"})
        assert not form.is_valid()
        assert form.errors["email"] == ["Please enter a valid email address"]

    def test_length_limits(self) -> None:
        """Name and note lengths are capped."""
        form = BookingForm(
            data={"name": "A" * 201, "email": "ada@example.com", "note": "n" * 1001},
        )
        assert not form.is_valid()
        assert form.errors["name"] == ["Name cannot exceed 200 characters"]
        assert form.errors["note"] == ["Note cannot exceed 1000 characters"]

    def test_labels(self) -> None:
        """Fields carry the labels shown on the event page."""
        form = BookingForm()
        assert form.fields["name"].label == "Full Name"
        assert form.fields["email"].label == "Email Address"
        assert form.fields["note"].label == "Additional Notes (Optional)"
