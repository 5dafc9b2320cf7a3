"""Events that members can book."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, ClassVar

from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _


if TYPE_CHECKING:
    from django_stubs_ext.db.models.manager import RelatedManager

    from bookings.models import EventBooking

MAX_EVENT_NAME_LENGTH = 200
MAX_EVENT_SLUG_LENGTH = 100
MAX_FIELD_LENGTH = 200


class EventQuerySet(models.QuerySet):
    """Custom QuerySet for the Event model."""

    def active(self) -> EventQuerySet:
        """Return events visible on the site, soonest first."""
        return self.filter(is_active=True).order_by(
            models.F("start_time").asc(nulls_last=True),
            "name",
        )


class Event(models.Model):
    """An event members can book, e.g. a guided museum visit."""

    key = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        help_text=_("Stable identifier of the event. Bookings reference this key."),
    )

    name = models.CharField(
        unique=True,
        max_length=MAX_EVENT_NAME_LENGTH,
        help_text=_("Display name of the event."),
    )

    slug = models.SlugField(
        max_length=MAX_EVENT_SLUG_LENGTH,
        unique=True,
        help_text=_("Name used in the event's URL."),
    )

    description = models.TextField(
        blank=True,
        default="",
        help_text=_("What the event is about, shown on the event page."),
    )

    start_time = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("When the event starts. Leave blank if not scheduled yet."),
    )

    location = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        blank=True,
        default="",
        help_text=_("Where the event takes place."),
    )

    is_active = models.BooleanField(
        default=True,
        help_text=_("Whether this event is visible on the site and open for bookings"),
    )

    objects = EventQuerySet.as_manager()

    if TYPE_CHECKING:
        bookings: RelatedManager[EventBooking]

    class Meta:
        """Metadata for the Event model."""

        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering: ClassVar[list[str]] = ["name"]

    def __str__(self) -> str:
        """Return the event name."""
        return self.name

    def get_absolute_url(self) -> str:
        """Return the public event page."""
        return reverse("event_detail", kwargs={"slug": self.slug})
