"""
Memberbase CRM API client.

Bookings are mirrored into Memberbase as contacts. All network interaction with Memberbase is
centralized here so that endpoint probing, retry policy and response parsing are applied
consistently. ``create_contact`` never raises for HTTP or network failures: the outcome is
returned as a :class:`ContactSyncResult` and stored on the booking.

Some Memberbase environments expose contacts under ``/api/contacts``, others under
``/contacts``. Unless the configured base URL already points into ``/api``, both are tried in
that order, moving on only when the first answers 404.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, NamedTuple

import requests
import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, ConfigDict, ValidationError
from requests.exceptions import (
    ConnectionError as RequestsConnectionError,
    RequestException,
    Timeout,
)
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from utils.email_utils import loggable_email
from utils.url import append_path


logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://demo-log.memberbase-sandbox.com"
DEFAULT_TIMEOUT = 10
CONTACT_SOURCE = "Event Booking System"

MSG_CREATED = "Contact created successfully in Memberbase CRM"
MSG_CREATED_WITHOUT_ID = "Contact created but ID could not be retrieved"
MSG_NETWORK_ERROR = "Network error connecting to Memberbase CRM"
MSG_UNEXPECTED_ERROR = "Unexpected error occurred while creating contact"


class ContactSyncResult(NamedTuple):
    """Outcome of a contact creation attempt."""

    success: bool
    contact_id: str | None
    message: str


class ContactData(BaseModel):
    """The ``data`` object of a contact creation response. Only the id is used."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str


class ContactCreatedResponse(BaseModel):
    """Body of a successful contact creation: ``{"data": {"id": ...}}``."""

    data: ContactData


class MemberbaseClient:
    """Thin client for the Memberbase contacts API using a bearer-token session."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """
        Configure the HTTP session.

        Raises:
            ImproperlyConfigured: If no API key is given

        """
        if not api_key:
            msg = "Memberbase API key not configured (MEMBERBASE_API_KEY)"
            raise ImproperlyConfigured(msg)
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_settings(cls) -> MemberbaseClient:
        """Build a client from the ``MEMBERBASE_*`` settings."""
        return cls(
            api_key=getattr(settings, "MEMBERBASE_API_KEY", ""),
            base_url=getattr(settings, "MEMBERBASE_BASE_URL", DEFAULT_BASE_URL),
            timeout=getattr(settings, "MEMBERBASE_TIMEOUT", DEFAULT_TIMEOUT),
        )

    def contact_endpoints(self) -> list[str]:
        """Return the contact creation URLs to try, in order."""
        base = self.base_url.rstrip("/").lower()
        if base.endswith("/api") or "/api/" in base:
            paths = ["contacts"]
        else:
            paths = ["api/contacts", "contacts"]
        return [append_path(self.base_url, path) for path in paths]

    def create_contact(self, name: str, email: str) -> ContactSyncResult:
        """
        Create a contact for ``name`` and ``email``.

        Args:
            name: Full name of the contact
            email: Email address of the contact

        Returns:
            ContactSyncResult: success flag, contact id when known, and a human-readable message

        """
        logged_email = loggable_email(email)
        payload = {"name": name, "email": email, "source": CONTACT_SOURCE}
        response: requests.Response
        tried: list[str] = []

        try:
            logger.info("Creating contact in Memberbase", email=logged_email)
            for url in self.contact_endpoints():
                tried.append(url)
                logger.info("Calling Memberbase endpoint", url=url)
                response = self._post(url, payload)
                # Only a 404 moves on to the next endpoint
                if response.status_code != HTTPStatus.NOT_FOUND:
                    break
                logger.warning("Memberbase endpoint returned 404, trying next fallback", url=url)
        except (Timeout, RequestsConnectionError):
            logger.warning("Network error calling Memberbase", email=logged_email, urls=tried)
            return ContactSyncResult(success=False, contact_id=None, message=MSG_NETWORK_ERROR)
        except RequestException as e:
            logger.warning("Request error calling Memberbase", email=logged_email, error=str(e))
            return ContactSyncResult(success=False, contact_id=None, message=MSG_NETWORK_ERROR)
        except Exception:
            logger.exception("Unexpected error creating Memberbase contact", email=logged_email)
            return ContactSyncResult(success=False, contact_id=None, message=MSG_UNEXPECTED_ERROR)

        if HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES:
            return self._parse_created(response)

        logger.error(
            "Memberbase API returned error",
            status_code=response.status_code,
            body=response.text,
            url=response.url or tried[-1],
        )
        return ContactSyncResult(
            success=False,
            contact_id=None,
            message=f"API Error: {response.status_code} {response.reason or ''}".strip(),
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((Timeout, RequestsConnectionError)),
        reraise=True,
    )
    def _post(self, url: str, payload: dict[str, Any]) -> requests.Response:
        """POST JSON with retry on timeouts and connection errors."""
        return self.session.post(url, json=payload, timeout=self.timeout)

    @staticmethod
    def _parse_created(response: requests.Response) -> ContactSyncResult:
        """Extract ``data.id`` from a 2xx response, tolerating bodies without it."""
        try:
            created = ContactCreatedResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                "Failed to parse contact id from Memberbase response",
                body=response.text,
            )
            return ContactSyncResult(success=True, contact_id=None, message=MSG_CREATED_WITHOUT_ID)

        logger.info("Created contact in Memberbase", contact_id=created.data.id)
        return ContactSyncResult(success=True, contact_id=created.data.id, message=MSG_CREATED)
