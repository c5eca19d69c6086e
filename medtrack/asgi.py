"""
ASGI config for the MedTrack project.

Only plain HTTP is served; every request is handled synchronously by
Django behind the ASGI adapter.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medtrack.settings")

application = get_asgi_application()
