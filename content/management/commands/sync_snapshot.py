from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from content.services import get_snapshot_store, sync_snapshot


class Command(BaseCommand):
    help = "Write the current database content to the JSON snapshot."

    def handle(self, *args, **opts):
        try:
            data = sync_snapshot()
        except DatabaseError as e:
            raise CommandError(f"Database unavailable: {e}") from e
        sections = ", ".join(sorted(data))
        self.stdout.write(self.style.SUCCESS(f"Snapshot written to {get_snapshot_store().path} ({sections})"))
