"""WSGI entry point.

Exposes ``application`` for gunicorn / the Django dev server and checks
the database connection once on start-up so a bad ``DATABASE_URL`` shows
up in the logs immediately instead of on the first request.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db()
