import json

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.db import transaction

from content import models
from content.defaults import SECTIONS, default_profile_data
from content.reconcile import merge_profile_data, normalize_name
from content.services import get_snapshot_store, save_section

# Children before parents so PROTECT never blocks the wipe
CONTENT_MODELS = [
    models.ProjectFeature,
    models.ProjectTechnology,
    models.Project,
    models.ProjectCategory,
    models.ExperienceDescription,
    models.Experience,
    models.TechnicalSkill,
    models.SoftSkill,
    models.CustomSkillCategory,
    models.Education,
    models.Certification,
    models.Achievement,
    models.About,
    models.Contact,
    models.SiteSettings,
]


class Command(BaseCommand):
    help = "Seed every portfolio section from the built-in defaults or a ProfileData JSON file (idempotent)."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--file", dest="file", help="Path to a JSON ProfileData document.")
        parser.add_argument("--reset", action="store_true", help="Delete all portfolio content before seeding.")
        parser.add_argument("--snapshot", action="store_true", help="Write the snapshot file only; leave the database alone.")

    def load_document(self, path):
        if not path:
            return default_profile_data()
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if isinstance(raw, dict) and isinstance(raw.get("profileData"), dict):
            raw = raw["profileData"]
        if not isinstance(raw, dict):
            raise CommandError("Input must be a ProfileData object")
        return merge_profile_data(raw, default_profile_data())

    def handle(self, *args, **opts):
        data = self.load_document(opts.get("file"))

        if opts.get("snapshot"):
            store = get_snapshot_store()
            store.save(data)
            self.stdout.write(self.style.SUCCESS(f"Snapshot written to {store.path}"))
            return

        if opts.get("reset"):
            with transaction.atomic():
                for model in CONTENT_MODELS:
                    model.objects.all().delete()
            self.stdout.write("Existing portfolio content deleted.")

        self.ensure_project_categories(data)

        for section in SECTIONS:
            result = save_section(section, data[section])
            if result.warning:
                self.stderr.write(self.style.WARNING(f"{section}: {result.warning}"))
            else:
                self.stdout.write(f"{section}: saved")

        self.stdout.write(self.style.SUCCESS(
            f"Portfolio seeded. projects={models.Project.objects.count()} "
            f"skills={models.TechnicalSkill.objects.count()} experience={models.Experience.objects.count()}"
        ))

    def ensure_project_categories(self, data):
        """Create the document's project categories and point projects at them by name."""
        projects = data.get("projects") or {}
        if isinstance(projects, list):
            projects = data["projects"] = {"items": projects, "categories": []}
        names = [c.get("name") for c in projects.get("categories") or [] if c.get("name")]
        names += [p.get("category") for p in projects.get("items") or [] if p.get("category")]
        by_name = {normalize_name(c.name): c for c in models.ProjectCategory.objects.all()}
        for name in names:
            if normalize_name(name) not in by_name:
                by_name[normalize_name(name)] = models.ProjectCategory.objects.create(name=name.strip())
        for item in projects.get("items") or []:
            category = by_name.get(normalize_name(item.get("category")))
            item["category_id"] = category.pk if category else None
