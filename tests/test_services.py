import pytest
from django.core.files.base import ContentFile
from django.db import DatabaseError, IntegrityError
from rest_framework.exceptions import ValidationError

from content import services
from content.defaults import SECTIONS, default_profile_data
from content.exceptions import CategoryInUseError, DuplicateNameError
from content.models import (
    About,
    Certification,
    Contact,
    CustomSkillCategory,
    Education,
    Experience,
    ExperienceDescription,
    Project,
    ProjectCategory,
    SoftSkill,
    TechnicalSkill,
)
from content.snapshot import SnapshotStore

pytestmark = pytest.mark.django_db


def test_empty_database_renders_every_section():
    data = services.fetch_portfolio_data()
    assert set(data) == set(SECTIONS)
    assert data["about"] == {"bio": "", "name": "", "image_url": ""}
    assert data["projects"] == {"items": [], "categories": []}
    assert data["skills"]["technical"] == []
    assert data["skills"]["timestamp"] > 0


def test_get_profile_data_prefers_database():
    result = services.get_profile_data()
    assert result.source == "database"
    assert result.warning is None


def test_get_profile_data_falls_back_to_snapshot(monkeypatch):
    stored = default_profile_data()
    stored["about"]["name"] = "From snapshot"
    SnapshotStore().save(stored)
    monkeypatch.setattr(services, "is_database_available", lambda: False)

    result = services.get_profile_data()
    assert result.source == "snapshot"
    assert result.data["about"]["name"] == "From snapshot"
    assert result.warning


def test_get_profile_data_falls_back_to_defaults(monkeypatch):
    monkeypatch.setattr(services, "is_database_available", lambda: False)
    result = services.get_profile_data()
    assert result.source == "defaults"
    assert result.data == default_profile_data()


def test_fetch_failure_mid_read_falls_back(monkeypatch):
    def boom():
        raise DatabaseError("connection reset")

    monkeypatch.setattr(services, "fetch_portfolio_data", boom)
    result = services.get_profile_data()
    assert result.source == "defaults"
    assert "DatabaseError" in result.warning


def test_save_about_updates_contact_too():
    result = services.save_section("about", {"name": "Ada", "bio": "Hi", "imageUrl": "/me.png",
                                             "email": "ada@example.org"})
    assert result.source == "database"
    assert result.data == {"bio": "Hi", "name": "Ada", "image_url": "/me.png"}
    assert About.objects.count() == 1
    assert Contact.load().email == "ada@example.org"

    services.save_section("about", {"name": "Ada L.", "bio": "Hi"})
    assert About.objects.count() == 1
    assert About.load().name == "Ada L."


def test_save_mirrors_section_into_snapshot():
    services.save_section("settings", {"resumeLink": "https://example.org/cv.pdf"})
    snapshot = SnapshotStore().load()
    assert snapshot["settings"] == {"resumeLink": "https://example.org/cv.pdf"}


def test_experience_upsert_and_delete():
    first = services.save_section("experience", [
        {"id": "new-1", "title": "Dev", "company": "Acme", "startDate": "2020-03", "description": ["a", "b"]},
        {"id": "new-2", "title": "Intern", "company": "Initech", "startDate": "2019-06"},
    ]).data
    assert Experience.objects.count() == 2
    dev = next(e for e in first if e["title"] == "Dev")
    assert dev["startDate"] == "March 2020"
    assert dev["description"] == ["a", "b"]

    services.save_section("experience", [
        {"id": dev["id"], "title": "Senior Dev", "company": "Acme", "startDate": "2020-03",
         "current": True, "endDate": "2022-01", "description": ["c"]},
    ])
    assert Experience.objects.count() == 1
    row = Experience.objects.get()
    assert str(row.pk) == dev["id"]
    assert row.title == "Senior Dev"
    assert row.end_date == ""
    assert list(ExperienceDescription.objects.values_list("description", flat=True)) == ["c"]


def test_skills_save_never_duplicates_names():
    services.save_section("skills", {
        "technical": [
            {"id": "new-1", "name": "Python", "level": 90, "category": "Languages"},
            {"id": "new-2", "name": " python ", "level": 10, "category": "Languages"},
        ],
        "soft": [{"id": "1", "name": "Teamwork", "level": 80}],
    })
    assert TechnicalSkill.objects.count() == 1
    original = TechnicalSkill.objects.get()
    assert original.level == 90

    # a fresh placeholder id with an existing name updates that row
    services.save_section("skills", {
        "technical": [{"id": "new-3", "name": "PYTHON", "level": 70, "category": "Languages"}],
        "soft": [{"id": "2", "name": "teamwork", "level": 85}],
    })
    assert TechnicalSkill.objects.count() == 1
    updated = TechnicalSkill.objects.get()
    assert updated.pk == original.pk
    assert updated.level == 70
    assert SoftSkill.objects.get().level == 85


def test_skills_omitted_rows_are_deleted():
    services.save_section("skills", {"technical": [
        {"name": "Go", "level": 60, "category": "Languages"},
        {"name": "Rust", "level": 50, "category": "Languages"},
    ]})
    services.save_section("skills", {"technical": [{"name": "Go", "level": 65, "category": "Languages"}]})
    assert list(TechnicalSkill.objects.values_list("name", flat=True)) == ["Go"]


def test_skills_blank_name_is_rejected():
    with pytest.raises(ValidationError):
        services.save_section("skills", {"technical": [{"name": "  ", "level": 50}]})
    assert TechnicalSkill.objects.count() == 0


def test_skills_resolve_custom_categories():
    data = services.save_section("skills", {
        "technical": [
            {"name": "Terraform", "level": 70, "category": "Cloud"},
            {"name": "SQL", "level": 80, "category": "Databases"},
        ],
        "customCategories": [{"id": "new-1", "name": "Cloud", "icon": "cloud", "color": "#0ea5e9"}],
    }).data
    cloud = CustomSkillCategory.objects.get()
    by_name = {s["name"]: s for s in data["technical"]}
    assert by_name["Terraform"]["custom_category_id"] == str(cloud.pk)
    assert by_name["Terraform"]["customCategory"]["name"] == "Cloud"
    assert by_name["SQL"]["category"] == "Databases"
    assert by_name["SQL"]["customCategory"] is None
    assert data["customCategories"] == [{"id": str(cloud.pk), "name": "Cloud", "icon": "cloud", "color": "#0ea5e9"}]


def test_projects_save_with_children_and_category():
    category = ProjectCategory.objects.create(name="Web Application")
    data = services.save_section("projects", {"items": [{
        "id": "new-1",
        "title": "Shop",
        "category": "web application",
        "teamType": "team",
        "technologies": ["Django", "React"],
        "description": "A small online shop.",
        "features": ["Checkout"],
        "image": "/placeholder.svg?height=400&width=600",
        "github": "https://github.com/example/shop",
    }]}).data
    item = data["items"][0]
    assert item["category"] == "Web Application"
    assert item["category_id"] == category.pk
    assert item["technologies"] == ["Django", "React"]
    assert item["features"] == ["Checkout"]
    assert item["teamType"] == "team"
    assert data["categories"] == [{"id": category.pk, "name": "Web Application"}]
    assert Project.objects.get().category_fk == category


def test_projects_unknown_category_is_kept_as_text():
    data = services.save_section("projects", [{
        "title": "Thing",
        "category": "Robotics",
        "description": "Line-following robot.",
        "github": "https://github.com/example/thing",
    }]).data
    assert data["items"][0]["category"] == "Robotics"
    assert data["items"][0]["category_id"] is None


def test_education_and_certifications_replace_all():
    services.save_section("education", [{"degree": "BSc", "institution": "MIT", "startYear": 2014}])
    services.save_section("education", [{"degree": "MSc", "institution": "Stanford", "start_year": "2018"}])
    data = services.get_section("education").data
    assert [e["degree"] for e in data] == ["MSc"]
    assert data[0]["startYear"] == "2018"

    keep = "7d0b1f5e-5a4e-4a3b-9a51-9d5f0f0c2a11"
    certs = services.save_section("certifications", [{"id": keep, "title": "CKA", "issuer": "CNCF", "certificate_url": ""}]).data
    assert certs[0]["id"] == keep


def test_save_falls_back_to_snapshot_when_database_down(monkeypatch):
    monkeypatch.setattr(services, "is_database_available", lambda: False)
    result = services.save_section("contact", {"email": "a@b.io", "phone": "1", "location": "X"})
    assert result.source == "snapshot"
    assert result.warning
    assert Contact.objects.count() == 0
    assert SnapshotStore().load()["contact"] == {"email": "a@b.io", "phone": "1", "location": "X"}


def test_save_survives_database_error_during_write(monkeypatch):
    def boom(data):
        raise DatabaseError("deadlock detected")

    monkeypatch.setitem(services._WRITERS, "settings", boom)
    result = services.save_section("settings", {"resumeLink": "https://example.org/cv.pdf"})
    assert result.source == "snapshot"
    assert "DatabaseError" in result.warning
    assert SnapshotStore().load()["settings"]["resumeLink"] == "https://example.org/cv.pdf"


def test_offline_skills_save_attaches_categories(monkeypatch):
    monkeypatch.setattr(services, "is_database_available", lambda: False)
    data = services.save_section("skills", {
        "technical": [{"name": "K8s", "level": 60, "custom_category_id": "c1"}],
        "customCategories": [{"id": "c1", "name": "Cloud"}],
    }).data
    assert data["technical"][0]["category"] == "Cloud"
    assert data["timestamp"] > 0


def test_custom_category_operations():
    cloud = services.create_custom_category(" Cloud ", icon="cloud")
    assert cloud.name == "Cloud"
    with pytest.raises(DuplicateNameError):
        services.create_custom_category("cloud")

    skill = TechnicalSkill.objects.create(name="AWS", level=80, category="Cloud", custom_category=cloud)
    services.update_custom_category(cloud.pk, name="Cloud Platforms")
    skill.refresh_from_db()
    assert skill.category == "Cloud Platforms"

    services.delete_custom_category(cloud.pk)
    skill.refresh_from_db()
    assert skill.custom_category is None
    assert skill.category == "Cloud Platforms"


def test_project_category_in_use_cannot_be_deleted():
    category = ProjectCategory.objects.create(name="Blockchain")
    Project.objects.create(title="Chain", category="Blockchain", category_fk=category)
    with pytest.raises(CategoryInUseError) as exc:
        services.delete_project_category(category)
    assert "1 project(s)" in str(exc.value.detail)
    assert ProjectCategory.objects.filter(pk=category.pk).exists()


def test_sync_snapshot_copies_database():
    services.save_section("contact", {"email": "db@example.org"})
    SnapshotStore().clear()
    services.sync_snapshot()
    assert SnapshotStore().load()["contact"]["email"] == "db@example.org"


@pytest.mark.parametrize("section", SECTIONS)
def test_default_document_passes_validation(section):
    services.validate_section(section, default_profile_data()[section])


_VALID_PROJECT = {
    "title": "Shop",
    "category": "Web Application",
    "description": "A small online shop.",
    "github": "https://github.com/example/shop",
}


@pytest.mark.parametrize("section, payload, model", [
    ("experience", [{"title": "Dev", "company": "Acme", "startDate": ""}], Experience),
    ("certifications", [{"title": "CKA", "date": "2023"}], Certification),
    ("contact", {"email": "", "phone": "555-0100"}, Contact),
    ("projects", [dict(_VALID_PROJECT, title="S")], Project),
    ("projects", [dict(_VALID_PROJECT, description="Too short")], Project),
    ("projects", [dict(_VALID_PROJECT, category="")], Project),
    ("projects", [dict(_VALID_PROJECT, github="not a url")], Project),
])
def test_required_fields_are_enforced(section, payload, model):
    with pytest.raises(ValidationError):
        services.save_section(section, payload)
    assert model.objects.count() == 0
    assert not SnapshotStore().exists()


def test_project_error_messages():
    with pytest.raises(ValidationError) as exc:
        services.validate_section("projects", [dict(_VALID_PROJECT, title="S", description="short", github="nope")])
    errors = exc.value.detail["items"][0]
    assert errors["title"] == ["Title must be at least 2 characters."]
    assert errors["description"] == ["Description must be at least 10 characters."]
    assert errors["github"] == ["Please enter a valid URL."]


def test_about_save_refreshes_contact_in_snapshot():
    services.save_section("contact", {"email": "a@b.co", "phone": "1"})
    services.save_section("about", {"name": "Ada", "email": "new@b.co"})
    snapshot = SnapshotStore().load()
    assert snapshot["contact"]["email"] == "new@b.co"
    assert snapshot["contact"]["phone"] == "1"
    assert snapshot["about"]["name"] == "Ada"


def test_repeated_id_in_one_payload_is_rejected():
    record_id = "7d0b1f5e-5a4e-4a3b-9a51-9d5f0f0c2a11"
    with pytest.raises(ValidationError) as exc:
        services.save_section("education", [
            {"id": record_id, "degree": "BSc", "institution": "MIT"},
            {"id": record_id, "degree": "MSc", "institution": "MIT"},
        ])
    assert f"Duplicate id: {record_id}" in str(exc.value.detail)
    assert Education.objects.count() == 0


def test_constraint_violation_is_a_validation_error(monkeypatch):
    def reject(items):
        raise IntegrityError("UNIQUE constraint failed: education.id")

    monkeypatch.setitem(services._WRITERS, "education", reject)
    with pytest.raises(ValidationError) as exc:
        services.save_section("education", [{"degree": "BSc", "institution": "MIT"}])
    assert "UNIQUE constraint failed" in str(exc.value.detail)
    assert not SnapshotStore().exists()


def test_new_image_url_replaces_uploaded_file():
    about = About.objects.create(name="A")
    about.image.save("me.jpg", ContentFile(b"jpeg bytes"))
    uploaded_url = About.load().image_url
    assert uploaded_url.endswith(".jpg")

    # resubmitting the current URL keeps the file
    services.save_section("about", {"name": "A", "imageUrl": uploaded_url})
    assert About.load().image

    result = services.save_section("about", {"name": "A", "imageUrl": "https://i.imgur.com/x.png"})
    stored = About.load()
    assert stored.image_url == "https://i.imgur.com/x.png"
    assert not stored.image
    assert result.data["image_url"] == "https://i.imgur.com/x.png"


def test_new_project_image_url_replaces_uploaded_file():
    project = Project.objects.create(title="Shop", category="Web Application")
    project.image.save("shot.jpg", ContentFile(b"jpeg bytes"))
    project.refresh_from_db()

    services.save_section("projects", [dict(_VALID_PROJECT, id=str(project.pk), image="https://i.imgur.com/y.png")])
    project.refresh_from_db()
    assert project.image_url == "https://i.imgur.com/y.png"
    assert not project.image
