"""Defines the configuration for the Bookings app."""

from django.apps import AppConfig


class BookingsConfig(AppConfig):
    """Configuration class for the Bookings app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "bookings"
