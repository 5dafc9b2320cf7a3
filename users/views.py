"""Views for member sign-in and profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from allauth.account.forms import LoginForm
from allauth.account.views import LoginView
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.translation import gettext_lazy as _

from bookings.models import EventBooking

from .forms import ProfileForm


if TYPE_CHECKING:
    from .models import CustomUser


logger = structlog.get_logger(__name__)


class MemberLoginView(LoginView):
    """Email and password sign-in for members, flashing a message on bad credentials."""

    template_name = "account/login.html"

    def form_invalid(self, form: LoginForm) -> HttpResponse:
        """Flash an error when the credentials were rejected."""
        if not form.data.get("login") or not form.data.get("password"):
            messages.error(self.request, _("Please enter both username and password."))
        else:
            messages.error(self.request, _("Invalid username or password."))
        return super().form_invalid(form)


@login_required
def profile_view(request: HttpRequest) -> HttpResponse:
    """Let members edit their names and list their bookings."""
    user: CustomUser = request.user  # type: ignore[assignment]
    if request.method == "POST":
        form = ProfileForm(request.POST, instance=user)
        if form.is_valid():
            form.save()
            logger.info("Profile updated", user_id=user.pk)
            messages.success(request, _("Your profile has been updated."))
            return redirect("user_profile")
    else:
        form = ProfileForm(instance=user)

    bookings = EventBooking.objects.filter(member=user).select_related("event")
    return render(request, "users/profile.html", {"form": form, "bookings": bookings})
