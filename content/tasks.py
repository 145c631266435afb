import logging
from datetime import datetime, timezone

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.db import DatabaseError

from .services import is_database_available, sync_snapshot

logger = logging.getLogger(__name__)


@shared_task
def send_contact_email(name: str, email: str, message: str) -> str:
    subject = f"Portfolio contact from {name}"
    body = f"From: {name} <{email}>\n\n{message}"
    send_mail(subject, body, settings.DEFAULT_FROM_EMAIL, [settings.DEFAULT_FROM_EMAIL])
    return f"sent:{datetime.now(timezone.utc).isoformat()}"


@shared_task
def refresh_snapshot() -> str:
    """Keep the offline copy close to the database."""
    if not is_database_available():
        logger.warning("Database unavailable; snapshot left as is")
        return "skipped"
    try:
        sync_snapshot()
    except DatabaseError as e:
        logger.error("Snapshot refresh failed: %s", e)
        return "failed"
    return f"refreshed:{datetime.now(timezone.utc).isoformat()}"
