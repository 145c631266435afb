import json
from io import StringIO

import pytest
from django.core.management import call_command
from django_celery_beat.models import PeriodicTask

from content.defaults import default_profile_data
from content.models import (
    Certification,
    Education,
    Experience,
    Project,
    ProjectCategory,
    SoftSkill,
    TechnicalSkill,
)
from content.snapshot import SnapshotStore
from content.tasks import refresh_snapshot

pytestmark = pytest.mark.django_db


def _counts():
    return {
        "projects": Project.objects.count(),
        "categories": ProjectCategory.objects.count(),
        "technical": TechnicalSkill.objects.count(),
        "soft": SoftSkill.objects.count(),
        "experience": Experience.objects.count(),
        "education": Education.objects.count(),
        "certifications": Certification.objects.count(),
    }


def test_seed_portfolio_is_idempotent():
    defaults = default_profile_data()
    out = StringIO()
    call_command("seed_portfolio", stdout=out)
    first = _counts()
    assert first["projects"] == len(defaults["projects"]["items"])
    assert first["categories"] == len(defaults["projects"]["categories"])
    assert first["technical"] == len(defaults["skills"]["technical"])
    assert first["soft"] == len(defaults["skills"]["soft"])
    assert "Portfolio seeded" in out.getvalue()

    call_command("seed_portfolio", stdout=StringIO())
    assert _counts() == first

    ml = Project.objects.get(title="AI-Powered Financial Advisor")
    assert ml.category_fk.name == "Machine Learning"
    assert list(ml.technologies.values_list("technology", flat=True))[:2] == ["Python", "TensorFlow"]


def test_seed_portfolio_from_file_with_reset(tmp_path):
    call_command("seed_portfolio", stdout=StringIO())
    doc = {"profileData": {
        "skills": {"technical": [{"name": "Elixir", "level": 70, "category": "Languages"}]},
        "certifications": [{"title": "Only cert", "issuer": "Linux Foundation"}],
    }}
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(doc), encoding="utf-8")

    call_command("seed_portfolio", "--file", str(path), "--reset", stdout=StringIO())
    assert list(TechnicalSkill.objects.values_list("name", flat=True)) == ["Elixir"]
    assert list(Certification.objects.values_list("title", flat=True)) == ["Only cert"]
    # sections absent from the file come from the defaults
    assert Education.objects.count() == len(default_profile_data()["education"])


def test_seed_portfolio_snapshot_only():
    call_command("seed_portfolio", "--snapshot", stdout=StringIO())
    assert Project.objects.count() == 0
    assert SnapshotStore().load() == default_profile_data()


def test_sync_snapshot_command():
    call_command("seed_portfolio", stdout=StringIO())
    SnapshotStore().clear()
    out = StringIO()
    call_command("sync_snapshot", stdout=out)
    snapshot = SnapshotStore().load()
    assert len(snapshot["projects"]["items"]) == Project.objects.count()
    assert "Snapshot written" in out.getvalue()


def test_print_storage_info():
    out = StringIO()
    call_command("print_storage_info", stdout=out)
    text = out.getvalue()
    assert "Supabase: not configured" in text
    assert "Exists: False" in text


def test_refresh_snapshot_task():
    assert refresh_snapshot().startswith("refreshed:")
    assert SnapshotStore().exists()


def test_daily_snapshot_task_is_registered():
    assert PeriodicTask.objects.filter(task="content.tasks.refresh_snapshot").exists()
