"""URL configuration for senior_events project."""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView


urlpatterns = [
    path(settings.ADMIN_URL, admin.site.urls),
    path("accounts/", include("users.urls")),
    path("accounts/", include("allauth.urls")),
    path("events/", include("events.urls")),
    path("bookings/", include("bookings.urls")),
    path("", RedirectView.as_view(pattern_name="event_list", permanent=False), name="home"),
    path("ht/", include("health_check.urls")),
]
