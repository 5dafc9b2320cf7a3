"""Custom adapter for django-allauth: staff-managed member accounts signing in with a password."""

from typing import Any

from allauth.account.adapter import DefaultAccountAdapter
from django.contrib import messages
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _


# Flash messages shown instead of allauth's defaults
MEMBER_MESSAGES = {
    "account/messages/logged_in.txt": _("You have successfully logged in!"),
    "account/messages/logged_out.txt": _("You have been logged out."),
}


class AccountAdapter(DefaultAccountAdapter):
    """
    Account adapter for the members area.

    Members are created by staff (admin or the ``createmember`` command), so self sign-up is
    closed. Sign-in and sign-out confirmations use the site's own wording.
    """

    def is_open_for_signup(self, request: HttpRequest) -> bool:
        """Refuse self sign-up."""
        del request
        return False

    def add_message(
        self,
        request: HttpRequest,
        level: int,
        message_template: str | None = None,
        message_context: dict[str, Any] | None = None,
        extra_tags: str = "",
        **kwargs: Any,
    ) -> None:
        """Replace login/logout confirmations with member wording, defer everything else."""
        if message_template in MEMBER_MESSAGES:
            messages.add_message(
                request,
                level,
                MEMBER_MESSAGES[message_template],
                extra_tags=extra_tags,
            )
            return
        super().add_message(
            request,
            level,
            message_template=message_template,
            message_context=message_context,
            extra_tags=extra_tags,
            **kwargs,
        )
