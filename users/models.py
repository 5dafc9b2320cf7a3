"""
Member accounts for the booking site.

This module provides:
- CustomUserManager: Manager class for member and staff creation
- CustomUser: User model with email-based authentication
- InvalidEmailError: Exception for email validation errors
"""

from __future__ import annotations

from typing import Any, ClassVar

from allauth.account.models import EmailAddress
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class InvalidEmailError(Exception):
    """Exception raised when an invalid email is provided."""

    def __init__(self, email: str) -> None:
        """
        Initialize the InvalidEmailError.

        Args:
            email: The invalid email that caused the error

        """
        self.email = email
        super().__init__(f"Invalid email address: {email}")


class CustomUserManager(BaseUserManager):
    """Manage member operations with email-based authentication."""

    def create_user(
        self,
        email: str,
        password: str | None = None,
        **extra_fields: Any,
    ) -> CustomUser:
        """
        Create and save a new member with a verified email address.

        Members without a password get an unusable one and cannot sign in until staff set it.

        Args:
            email: The email address for the new member
            password: Optional password for the new member
            **extra_fields: Additional fields to be saved on the user model

        Returns:
            CustomUser: The newly created user instance

        Raises:
            InvalidEmailError: If the email is invalid, already taken or not provided

        """
        if not email:
            raise InvalidEmailError(email) from None

        try:
            email = self.normalize_email(email).lower()
            user = self.model(email=email, **extra_fields)
            if password:
                user.set_password(password)
            else:
                user.set_unusable_password()
            user.full_clean()
        except ValidationError as exc:
            raise InvalidEmailError(email) from exc

        user.save(using=self._db)
        EmailAddress.objects.create(
            user=user,
            email=email,
            primary=True,
            verified=True,
        )
        return user

    def create_superuser(
        self,
        email: str,
        password: str,
        **extra_fields: Any,
    ) -> CustomUser:
        """
        Create and save a new superuser with a verified email address.

        Raises:
            ValidationError: If superuser flags are not properly set
            ValueError: If no password is given

        """
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if not extra_fields.get("is_staff"):
            msg = "Superuser must have is_staff=True"
            raise ValidationError(msg)

        if not extra_fields.get("is_superuser"):
            msg = "Superuser must have is_superuser=True"
            raise ValidationError(msg)

        if not password:
            msg = "Superuser must have a password"
            raise ValueError(msg)

        return self.create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Member account using the email address as the login name."""

    username = None
    email = models.EmailField(
        _("email address"),
        unique=True,
        error_messages={
            "unique": _("A member with that email already exists."),
        },
    )
    display_name = models.CharField(
        max_length=100,
        blank=True,
        help_text=_("Name used on bookings when first and last name are empty (optional)."),
    )
    date_joined = models.DateTimeField(default=timezone.now)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    objects = CustomUserManager()

    class Meta:
        """Metadata for CustomUser model."""

        verbose_name = _("member")
        verbose_name_plural = _("members")

    def __str__(self) -> str:
        """Return string representation of the member."""
        return self.email

    def clean(self) -> None:
        """Ensure email is lowercase before saving."""
        super().clean()
        self.email = self.email.lower()

    @property
    def full_name(self) -> str:
        """Return first and last name, the display name, or the email as a last resort."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.display_name.strip() or self.email
