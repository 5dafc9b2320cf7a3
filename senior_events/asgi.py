"""ASGI config for senior_events project, served by daphne."""

import os

from django.core.asgi import get_asgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "senior_events.settings")

application = get_asgi_application()
