"""Unit tests for utils.email_utils."""

import hashlib

from django.test import override_settings

from utils.email_utils import hash_email, loggable_email


def test_hash_email_is_sha256() -> None:
    """The hash is the SHA-256 hex digest of the address."""
    assert hash_email("a@example.com") == hashlib.sha256(b"a@example.com").hexdigest()


def test_hash_email_normalizes() -> None:
    """Case and surrounding whitespace do not change the hash."""
    assert hash_email("  A@Example.COM ") == hash_email("a@example.com")


class TestLoggableEmail:
    """Verify loggable_email hashes or passes through emails based on settings."""

    @override_settings(LOG_EMAIL_HASH=True)
    def test_hash_enabled(self) -> None:
        """Return the SHA-256 hex digest of the lower-cased email."""
        result = loggable_email("Test@Example.com")
        assert result == hash_email("test@example.com")
        assert len(result) == 64

    @override_settings(LOG_EMAIL_HASH=False)
    def test_hash_disabled(self) -> None:
        """Return the email unchanged when LOG_EMAIL_HASH is disabled."""
        assert loggable_email("test@example.com") == "test@example.com"

    def test_empty_values(self) -> None:
        """Pass None and empty strings through."""
        assert loggable_email(None) is None
        assert loggable_email("") == ""
