"""URL configuration for the bookings app."""

from django.urls import path

from .views import event_bookings


urlpatterns = [
    path("events/<uuid:event_key>/", event_bookings, name="event_bookings"),
]
