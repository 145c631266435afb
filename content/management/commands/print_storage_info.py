from django.conf import settings
from django.core.management.base import BaseCommand

from content.models import About, Project
from content.services import get_snapshot_store
from content.storage_backends import SupabaseMediaStorage, select_media_storage, supabase_configured


class Command(BaseCommand):
    help = "Print effective media storage and snapshot configuration"

    def handle(self, *args, **options):
        self.stdout.write("== Storage configuration ==")
        self.stdout.write(f"DEBUG: {settings.DEBUG}")
        self.stdout.write(f"MEDIA_URL: {settings.MEDIA_URL}")
        self.stdout.write(f"STORAGES.default: {settings.STORAGES.get('default')}")
        self.stdout.write(f"Upload storage: {type(select_media_storage()).__name__}")
        self.stdout.write(f"Project.image.storage: {type(Project._meta.get_field('image').storage).__name__}")
        self.stdout.write(f"About.image.storage: {type(About._meta.get_field('image').storage).__name__}")

        if supabase_configured():
            sb = SupabaseMediaStorage()
            self.stdout.write(f"Supabase bucket: {sb.bucket}")
            self.stdout.write(f"Supabase public base: {sb.public_base}")
        else:
            self.stdout.write("Supabase: not configured (SUPABASE_PROJECT_URL unset)")

        store = get_snapshot_store()
        self.stdout.write("\n== Snapshot ==")
        self.stdout.write(f"Path: {store.path}")
        self.stdout.write(f"Exists: {store.exists()}")
        self.stdout.write("Done.")
