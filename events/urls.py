"""URL configuration for the events app."""

from django.urls import path

from bookings.views import submit_booking

from .views import EventDetailView, EventListView


urlpatterns = [
    path("", EventListView.as_view(), name="event_list"),
    path("<uuid:event_key>/book/", submit_booking, name="booking_submit"),
    path("<slug:slug>/", EventDetailView.as_view(), name="event_detail"),
]
