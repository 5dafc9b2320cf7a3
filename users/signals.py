"""
Authentication signal handlers that log to the dedicated 'auth' logger.

Member sign-ins, sign-outs and failed attempts are emitted as structured events. Email addresses
are hashed unless ``LOG_EMAIL_HASH`` is turned off.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.contrib.auth.signals import (
    user_logged_in,
    user_logged_out,
    user_login_failed,
)
from django.dispatch import receiver

from utils.email_utils import loggable_email


logger = structlog.get_logger("auth")

SENSITIVE_IDENTIFIERS = {"email", "login", "username"}


def client_ip(request: Any | None) -> str | None:
    """Return the caller's address, preferring the first X-Forwarded-For hop."""
    if request is None:
        return None
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


@receiver(user_logged_in)
def on_member_logged_in(
    sender: type[Any],
    request: Any,
    user: Any,
    **_kwargs: Any,
) -> None:
    """Log successful sign-in."""
    del sender, _kwargs
    logger.info(
        "login",
        user_id=getattr(user, "pk", None),
        user_email=loggable_email(getattr(user, "email", None)),
        is_staff=getattr(user, "is_staff", False),
        ip=client_ip(request),
    )


@receiver(user_logged_out)
def on_member_logged_out(
    sender: type[Any],
    request: Any,
    user: Any | None,
    **_kwargs: Any,
) -> None:
    """Log sign-out."""
    del sender, _kwargs
    logger.info(
        "logout",
        user_id=getattr(user, "pk", None) if user else None,
        ip=client_ip(request),
    )


@receiver(user_login_failed)
def on_member_login_failed(
    sender: type[Any],
    credentials: dict[str, Any],
    request: Any | None = None,
    **_kwargs: Any,
) -> None:
    """Log failed sign-in attempts without the password."""
    del sender, _kwargs
    provided = {
        key: loggable_email(str(value)) if key.lower() in SENSITIVE_IDENTIFIERS else value
        for key, value in (credentials or {}).items()
        if key.lower() != "password"
    }
    logger.warning(
        "login_failed",
        provided=provided,
        ip=client_ip(request),
    )
