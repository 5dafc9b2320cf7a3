"""Request diagnostics for booking submissions."""

from collections.abc import Callable

import structlog
from django.http import HttpRequest, HttpResponse
from django.urls import Resolver404, resolve


logger = structlog.get_logger(__name__)

BOOKING_URL_NAME = "booking_submit"


def header_stats(request: HttpRequest) -> tuple[int, int]:
    """Return the number of headers and their total size (names plus values)."""
    headers = request.headers
    return len(headers), sum(len(name) + len(value) for name, value in headers.items())


def is_booking_submission(request: HttpRequest) -> bool:
    """Tell whether ``request`` posts to the booking view."""
    if request.method != "POST":
        return False
    try:
        match = resolve(request.path_info)
    except Resolver404:
        return False
    return match.url_name == BOOKING_URL_NAME


class BookingRequestLoggingMiddleware:
    """
    Log booking submissions on the way in and out.

    Header count and total header size are logged before the rest of the chain runs, so requests
    rejected early (for example by the CSRF check) still show up. The status code is logged after.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Store the next handler in the chain."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Log method and header statistics, then the response status."""
        if not is_booking_submission(request):
            return self.get_response(request)

        count, size = header_stats(request)
        logger.info(
            "Booking POST incoming",
            method=request.method,
            headers_count=count,
            headers_size=size,
            path=request.path,
        )
        response = self.get_response(request)
        logger.info(
            "Booking POST completed",
            status_code=response.status_code,
            path=request.path,
        )
        return response
