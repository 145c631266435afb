import logging

from django.apps import AppConfig
from django.db import DatabaseError
from django.db.models.signals import post_migrate

logger = logging.getLogger(__name__)


def ensure_daily_snapshot_task(sender, **kwargs):
    """Register the 03:00 snapshot refresh with django-celery-beat."""
    from django.conf import settings
    from django_celery_beat.models import CrontabSchedule, PeriodicTask

    if getattr(settings, "CELERY_TASK_ALWAYS_EAGER", False):
        return
    try:
        schedule, _ = CrontabSchedule.objects.get_or_create(
            minute="0",
            hour="3",
            day_of_week="*",
            day_of_month="*",
            month_of_year="*",
            timezone=settings.TIME_ZONE,
        )
        PeriodicTask.objects.get_or_create(
            name="Daily snapshot refresh",
            task="content.tasks.refresh_snapshot",
            crontab=schedule,
            defaults={"enabled": True},
        )
    except DatabaseError as e:
        # Beat tables not migrated yet
        logger.warning("Could not register the snapshot refresh: %s", e)


class ContentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "content"
    verbose_name = "Portfolio content"

    def ready(self):
        post_migrate.connect(ensure_daily_snapshot_task, sender=self, dispatch_uid="content_daily_snapshot")
