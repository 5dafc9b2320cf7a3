"""URL configuration for the users app."""

from allauth.account.views import logout
from django.urls import path

from .views import MemberLoginView, profile_view


urlpatterns = [
    path("login/", MemberLoginView.as_view(), name="account_login"),
    path("logout/", logout, name="account_logout"),
    path("profile/", profile_view, name="user_profile"),
]
