"""Admin interface for members."""

from typing import Any, ClassVar

from allauth.account.models import EmailAddress
from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin
from django.db.models import Count, QuerySet
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .forms import MemberChangeForm, MemberCreationForm
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    """Admin configuration for members, keyed by email instead of username."""

    form = MemberChangeForm
    add_form = MemberCreationForm

    list_display = (
        "email",
        "full_name",
        "is_active",
        "is_staff",
        "booking_count",
        "last_login_display",
        "date_joined_display",
    )
    list_filter = ("is_staff", "is_superuser", "is_active", "date_joined", "last_login")
    search_fields = ("email", "first_name", "last_name", "display_name")
    ordering = ("-date_joined",)
    actions: ClassVar[list[str]] = ["activate_members", "deactivate_members"]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Personal info"), {"fields": ("first_name", "last_name", "display_name")}),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                ),
                "description": _(
                    "Staff members can open the admin site and see event bookings.",
                ),
            },
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "first_name", "last_name", "password1", "password2"),
            },
        ),
    )

    readonly_fields = ("date_joined", "last_login")
    list_per_page = 25

    def get_queryset(self, request: HttpRequest) -> QuerySet[CustomUser]:
        """Annotate members with their number of bookings."""
        return super().get_queryset(request).annotate(bookings_total=Count("bookings"))

    @admin.display(description=_("Full Name"))
    def full_name(self, obj: CustomUser) -> str:
        """Display the member's name."""
        return obj.full_name

    @admin.display(description=_("Bookings"), ordering="bookings_total")
    def booking_count(self, obj: Any) -> int:
        """Display how many events the member booked."""
        return obj.bookings_total

    @admin.display(description=_("Joined"), ordering="date_joined")
    def date_joined_display(self, obj: CustomUser) -> str:
        """Format date joined for better readability."""
        return obj.date_joined.strftime("%Y-%m-%d %H:%M")

    @admin.display(description=_("Last Login"), ordering="last_login")
    def last_login_display(self, obj: CustomUser) -> str:
        """Format last login date for better readability."""
        if obj.last_login:
            return obj.last_login.strftime("%Y-%m-%d %H:%M")
        return _("Never")

    @admin.action(description=_("Activate selected members"))
    def activate_members(self, request: HttpRequest, queryset: QuerySet[CustomUser]) -> None:
        """Activate selected members."""
        count = queryset.filter(is_active=False).update(is_active=True)
        if count:
            messages.success(
                request,
                _("Successfully activated %(count)d members.") % {"count": count},
            )
        else:
            messages.info(request, _("All selected members were already active."))

    @admin.action(description=_("Deactivate selected members"))
    def deactivate_members(self, request: HttpRequest, queryset: QuerySet[CustomUser]) -> None:
        """Deactivate selected members."""
        # Don't allow deactivating your own account
        if request.user.pk in queryset.values_list("pk", flat=True):
            messages.error(request, _("You cannot deactivate your own account."))
            return

        count = queryset.filter(is_active=True).update(is_active=False)
        if count:
            messages.success(
                request,
                _("Successfully deactivated %(count)d members.") % {"count": count},
            )
        else:
            messages.info(request, _("All selected members were already inactive."))

    def save_model(self, request: HttpRequest, obj: CustomUser, form: Any, change: bool) -> None:  # noqa: FBT001
        """Save the member and record a verified primary email for new accounts."""
        super().save_model(request, obj, form, change)
        if not change:
            EmailAddress.objects.get_or_create(
                user=obj,
                email=obj.email,
                defaults={"primary": True, "verified": True},
            )
