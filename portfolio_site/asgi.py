"""ASGI entrypoint for the portfolio content API (uvicorn, daphne)."""

import os

from django.core.asgi import get_asgi_application

# Hosting dashboards tend to leave trailing whitespace in env values
os.environ["DJANGO_SETTINGS_MODULE"] = (os.environ.get("DJANGO_SETTINGS_MODULE") or "portfolio_site.settings").strip()

application = get_asgi_application()
