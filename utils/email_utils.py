"""Utility functions for handling email addresses in logs."""

import hashlib

from django.conf import settings


def hash_email(email: str) -> str:
    """Create a SHA-256 hash of a normalized (trimmed, lower-cased) email address."""
    return hashlib.sha256(email.strip().lower().encode()).hexdigest()


def loggable_email(value: str | None) -> str | None:
    """Return the email hashed, or as-is when ``LOG_EMAIL_HASH`` is turned off."""
    if not value:
        return value
    if getattr(settings, "LOG_EMAIL_HASH", True):
        return hash_email(value)
    return value
