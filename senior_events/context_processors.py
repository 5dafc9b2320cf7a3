"""Template context processors for site-wide branding and navigation."""

from typing import Any

from django.conf import settings
from django.http import HttpRequest
from django.urls import reverse

from utils.url import add_query_param


def branding(_: Any) -> dict[str, Any]:
    """Inject branding variables into all templates."""
    site_name = getattr(settings, "BRAND_SITE_NAME", "") or "Events"
    return {
        "brand_site_name": site_name,
        "brand_title": f"{site_name} Bookings",
        "brand_made_by_name": getattr(settings, "BRAND_MADE_BY_NAME", ""),
        "brand_made_by_url": getattr(settings, "BRAND_MADE_BY_URL", ""),
    }


def sign_in(request: HttpRequest) -> dict[str, str]:
    """Provide a sign-in link that returns to the current page."""
    return {"sign_in_url": add_query_param(reverse("account_login"), "next", request.path)}
