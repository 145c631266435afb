"""WSGI entrypoint for the portfolio content API (gunicorn, uwsgi)."""

import os

from django.core.wsgi import get_wsgi_application

os.environ["DJANGO_SETTINGS_MODULE"] = (os.environ.get("DJANGO_SETTINGS_MODULE") or "portfolio_site.settings").strip()

application = get_wsgi_application()
