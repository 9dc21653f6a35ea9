"""
ASGI config for the clinicalsapi project.

Each request runs as its own event-loop task; Django dispatches the
synchronous views to a worker thread.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "clinicalsapi.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
