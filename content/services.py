"""Portfolio data service.

Reads go database -> snapshot -> defaults. Writes go to the database inside
one transaction per section and are always mirrored into the snapshot.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Prefetch
from django.db.models.deletion import ProtectedError
from rest_framework.exceptions import ValidationError

from .defaults import FALLBACK_SOFT_SKILLS, PREDEFINED_CATEGORIES, SECTIONS, default_profile_data
from .exceptions import CategoryInUseError, DuplicateNameError
from .models import (
    About,
    Achievement,
    Certification,
    Contact,
    CustomSkillCategory,
    Education,
    Experience,
    ExperienceDescription,
    Project,
    ProjectCategory,
    ProjectFeature,
    ProjectTechnology,
    SiteSettings,
    SoftSkill,
    TechnicalSkill,
)
from .reconcile import (
    attach_custom_categories,
    check_section,
    dedupe_by_name,
    format_date_if_needed,
    is_placeholder_id,
    normalize_name,
    normalize_section,
)
from .serializers import SECTION_SERIALIZERS
from .snapshot import SnapshotStore

logger = logging.getLogger(__name__)

SOURCE_DATABASE = "database"
SOURCE_SNAPSHOT = "snapshot"
SOURCE_DEFAULTS = "defaults"


@dataclass
class DataResult:
    data: Any
    source: str  # "database" | "snapshot" | "defaults"
    warning: Optional[str] = None


def get_snapshot_store() -> SnapshotStore:
    return SnapshotStore()


def render_section(section: str, rows: Any) -> Any:
    """snake_case rows -> camelCase ProfileData section."""
    serializer_class, many = SECTION_SERIALIZERS[section]
    return serializer_class(rows, many=many).data


def _as_plain(value: Any) -> Any:
    # ReturnDict/ReturnList/OrderedDict -> plain containers for JSON and comparisons
    if isinstance(value, dict):
        return {k: _as_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_as_plain(v) for v in value]
    return value


def _uuid_or_none(value: Any) -> Optional[uuid.UUID]:
    if is_placeholder_id(value):
        return None
    return uuid.UUID(str(value))


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def is_database_available() -> bool:
    try:
        About.objects.exists()
        return True
    except DatabaseError as e:
        logger.error("Error checking database availability: %s", e)
        return False


def _category_row(cat: CustomSkillCategory) -> Dict[str, Any]:
    return {"id": str(cat.id), "name": cat.name, "icon": cat.icon, "color": cat.color}


def _fetch_about() -> Dict[str, Any]:
    about = About.load()
    return {
        "bio": about.bio if about else "",
        "name": about.name if about else "",
        "image_url": about.image_url if about else "",
    }


def _fetch_contact() -> Dict[str, Any]:
    contact = Contact.load()
    return {
        "email": contact.email if contact else "",
        "phone": contact.phone if contact else "",
        "location": contact.location if contact else "",
    }


def _fetch_education() -> List[Dict[str, Any]]:
    return list(
        Education.objects.order_by("-start_year", "degree").values(
            "id", "degree", "institution", "location", "start_year", "end_year", "grade", "specialization"
        )
    )


def _fetch_experience() -> List[Dict[str, Any]]:
    rows = []
    qs = Experience.objects.order_by("-start_date", "-created_at").prefetch_related(
        Prefetch("descriptions", queryset=ExperienceDescription.objects.order_by("display_order", "id"))
    )
    for exp in qs:
        rows.append({
            "id": exp.id,
            "title": exp.title,
            "company": exp.company,
            "location": exp.location,
            "start_date": format_date_if_needed(exp.start_date),
            "end_date": format_date_if_needed(exp.end_date),
            "current": exp.current,
            "descriptions": [d.description for d in exp.descriptions.all()],
        })
    return rows


def fetch_custom_categories() -> List[Dict[str, Any]]:
    return [_category_row(cat) for cat in CustomSkillCategory.objects.order_by("name")]


def _fetch_soft_skills() -> List[Dict[str, Any]]:
    try:
        return list(SoftSkill.objects.order_by("name").values("id", "name", "level"))
    except DatabaseError as e:
        logger.error("Error fetching soft skills, serving fallback list: %s", e)
        return [dict(s) for s in FALLBACK_SOFT_SKILLS]


def _fetch_skills() -> Dict[str, Any]:
    categories = fetch_custom_categories()
    technical = []
    for skill in TechnicalSkill.objects.select_related("custom_category").order_by("name"):
        technical.append({
            "id": str(skill.id),
            "name": skill.name,
            "level": skill.level,
            "category": skill.category,
            "custom_category_id": str(skill.custom_category_id) if skill.custom_category_id else None,
            "customCategory": _category_row(skill.custom_category) if skill.custom_category else None,
        })
    rows = []
    for skill in attach_custom_categories(technical, categories):
        skill["custom_category"] = skill.pop("customCategory")
        rows.append(skill)
    return {
        "technical": rows,
        "soft": _fetch_soft_skills(),
        "custom_categories": categories,
        "timestamp": int(time.time() * 1000),
    }


def _fetch_projects() -> Dict[str, Any]:
    categories = list(ProjectCategory.objects.order_by("name").values("id", "name"))
    names = {c["id"]: c["name"] for c in categories}
    items = []
    qs = Project.objects.order_by("-created_at", "title").prefetch_related(
        Prefetch("technologies", queryset=ProjectTechnology.objects.order_by("display_order", "id")),
        Prefetch("features", queryset=ProjectFeature.objects.order_by("display_order", "id")),
    )
    for project in qs:
        items.append({
            "id": project.id,
            "title": project.title,
            "category": names.get(project.category_fk_id) or project.category or "Other",
            "category_id": project.category_fk_id,
            "project_type": project.project_type,
            "team_type": project.team_type or "solo",
            "description": project.description,
            "features": [f.feature for f in project.features.all()],
            "technologies": [t.technology for t in project.technologies.all()],
            "image_url": project.image_url,
            "github": project.github,
            "demo": project.demo,
            "linkedin": project.linkedin,
            "date": project.date,
        })
    return {"items": items, "categories": categories}


def _fetch_certifications() -> List[Dict[str, Any]]:
    return list(
        Certification.objects.order_by("-date", "title").values("id", "title", "issuer", "date", "certificate_url")
    )


def _fetch_achievements() -> List[Dict[str, Any]]:
    return list(
        Achievement.objects.order_by("-date", "title").values("id", "title", "description", "date", "issuer", "url")
    )


def _fetch_settings() -> Dict[str, Any]:
    settings_row = SiteSettings.load()
    return {"resume_link": settings_row.resume_link if settings_row else ""}


_FETCHERS: Dict[str, Callable[[], Any]] = {
    "about": _fetch_about,
    "contact": _fetch_contact,
    "education": _fetch_education,
    "skills": _fetch_skills,
    "experience": _fetch_experience,
    "projects": _fetch_projects,
    "certifications": _fetch_certifications,
    "achievements": _fetch_achievements,
    "settings": _fetch_settings,
}


def fetch_section(section: str) -> Any:
    """One section straight from the database, in ProfileData shape. Raises DatabaseError."""
    check_section(section)
    return _as_plain(render_section(section, _FETCHERS[section]()))


def fetch_portfolio_data() -> Dict[str, Any]:
    """The whole ProfileData document from the database. Raises DatabaseError."""
    logger.info("Fetching portfolio data from the database")
    return {section: fetch_section(section) for section in SECTIONS}


def get_profile_data() -> DataResult:
    """Database when reachable, else the snapshot, else the built-in defaults."""
    store = get_snapshot_store()
    warning = None
    if is_database_available():
        try:
            return DataResult(data=fetch_portfolio_data(), source=SOURCE_DATABASE)
        except DatabaseError as e:
            logger.error("Error fetching from the database: %s", e)
            warning = f"Fell back from database: {type(e).__name__}"
    else:
        warning = "Database unavailable"
    if store.exists():
        return DataResult(data=store.get_profile_data(), source=SOURCE_SNAPSHOT, warning=warning)
    return DataResult(data=default_profile_data(), source=SOURCE_DEFAULTS, warning=warning)


def get_section(section: str) -> DataResult:
    check_section(section)
    result = get_profile_data()
    return DataResult(data=result.data[section], source=result.source, warning=result.warning)


# ---------------------------------------------------------------------------
# Section writers (validated snake_case data in, database rows out)
# ---------------------------------------------------------------------------


def _singleton(model):
    return model.load() or model()


def update_contact(data: Dict[str, Any]) -> None:
    contact = _singleton(Contact)
    for key in ("email", "phone", "location"):
        if key in data:
            setattr(contact, key, data[key] or "")
    contact.save()


def _contact_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: data[k] for k in ("email", "phone", "location") if data.get(k)}


def update_about(data: Dict[str, Any]) -> None:
    about = _singleton(About)
    about.name = data.get("name", about.name) or ""
    about.bio = data.get("bio", about.bio) or ""
    image_url = data.get("image_url", about.image_url) or ""
    if about.image and image_url != about.image_url:
        # An explicit URL replaces the uploaded file
        about.image = None
    about.image_url = image_url
    about.save()
    contact_fields = _contact_fields(data)
    if contact_fields:
        update_contact(contact_fields)


def update_education(items: List[Dict[str, Any]]) -> None:
    Education.objects.all().delete()
    Education.objects.bulk_create([
        Education(
            id=_uuid_or_none(item.get("id")) or uuid.uuid4(),
            degree=item["degree"],
            institution=item["institution"],
            location=item.get("location", ""),
            start_year=item.get("start_year", ""),
            end_year=item.get("end_year", ""),
            grade=item.get("grade", ""),
            specialization=item.get("specialization", ""),
        )
        for item in items
    ])


def _replace_children(model, parent_field: str, parent, value_field: str, values: List[str]) -> None:
    model.objects.filter(**{parent_field: parent}).delete()
    model.objects.bulk_create([
        model(**{parent_field: parent, value_field: value, "display_order": index})
        for index, value in enumerate(values)
    ])


def update_experience(items: List[Dict[str, Any]]) -> None:
    existing_ids = set(Experience.objects.values_list("id", flat=True))
    kept = set()
    for item in items:
        values = {
            "title": item["title"],
            "company": item["company"],
            "location": item.get("location", ""),
            "start_date": item.get("start_date", ""),
            "end_date": item.get("end_date", ""),
            "current": item.get("current", False),
        }
        exp_id = _uuid_or_none(item.get("id"))
        if exp_id in existing_ids:
            Experience.objects.filter(pk=exp_id).update(**values)
            experience = Experience(pk=exp_id)
        else:
            experience = Experience.objects.create(**values)
        kept.add(experience.pk)
        _replace_children(ExperienceDescription, "experience", experience, "description", item.get("descriptions") or [])
    Experience.objects.filter(pk__in=existing_ids - kept).delete()


def _resolve_project_category(item: Dict[str, Any], categories: List[ProjectCategory]):
    by_id = {c.id: c for c in categories}
    if item.get("category_id") in by_id:
        return by_id[item["category_id"]]
    wanted = normalize_name(item.get("category"))
    for category in categories:
        if wanted and normalize_name(category.name) == wanted:
            return category
    return None


def update_projects(data: Dict[str, Any]) -> None:
    categories = list(ProjectCategory.objects.all())
    existing_ids = set(Project.objects.values_list("id", flat=True))
    kept = set()
    for item in data.get("items") or []:
        category = _resolve_project_category(item, categories)
        values = {
            "title": item["title"],
            "category": category.name if category else (item.get("category") or "Other"),
            "category_fk": category,
            "project_type": item.get("project_type", ""),
            "team_type": item.get("team_type") or "solo",
            "description": item.get("description", ""),
            "image_url": item.get("image_url", ""),
            "github": item.get("github", ""),
            "demo": item.get("demo", ""),
            "linkedin": item.get("linkedin", ""),
            "date": item.get("date", ""),
        }
        project_id = _uuid_or_none(item.get("id"))
        if project_id in existing_ids:
            Project.objects.filter(pk=project_id).exclude(image_url=values["image_url"]).update(image=None)
            Project.objects.filter(pk=project_id).update(**values)
            project = Project(pk=project_id)
        else:
            project = Project.objects.create(**values)
        kept.add(project.pk)
        _replace_children(ProjectTechnology, "project", project, "technology", item.get("technologies") or [])
        _replace_children(ProjectFeature, "project", project, "feature", item.get("features") or [])
    Project.objects.filter(pk__in=existing_ids - kept).delete()


def _sync_named_rows(model, items: List[Dict[str, Any]], values_for: Callable[[Dict[str, Any]], Dict[str, Any]]) -> None:
    """Upsert rows matched by id, then by normalized name; delete the rest."""
    existing = list(model.objects.all())
    by_id = {row.pk: row for row in existing}
    by_name = {normalize_name(row.name): row for row in existing}
    processed = set()
    for item in dedupe_by_name(items):
        values = values_for(item)
        row = by_id.get(_uuid_or_none(item.get("id"))) or by_name.get(normalize_name(item["name"]))
        if row is not None and row.pk not in processed:
            model.objects.filter(pk=row.pk).update(**values)
            processed.add(row.pk)
        else:
            processed.add(model.objects.create(**values).pk)
    stale = [pk for pk in by_id if pk not in processed]
    if stale:
        logger.info("Deleting %d %s row(s)", len(stale), model._meta.db_table)
        model.objects.filter(pk__in=stale).delete()


def _resolve_custom_category(skill: Dict[str, Any], categories: List[CustomSkillCategory]):
    by_id = {str(c.id): c for c in categories}
    cat_id = skill.get("custom_category_id")
    if cat_id and str(cat_id) in by_id:
        return by_id[str(cat_id)]
    name = skill.get("category") or ""
    if name and name not in PREDEFINED_CATEGORIES:
        for category in categories:
            if normalize_name(category.name) == normalize_name(name):
                return category
    return None


def _sync_custom_categories(items: List[Dict[str, Any]]) -> None:
    # Non-destructive: categories are removed only through delete_custom_category
    existing = list(CustomSkillCategory.objects.all())
    by_id = {str(c.id): c for c in existing}
    by_name = {normalize_name(c.name): c for c in existing}
    for item in dedupe_by_name(items):
        row = by_id.get(str(item.get("id"))) or by_name.get(normalize_name(item["name"]))
        values = {"name": item["name"], "icon": item.get("icon", ""), "color": item.get("color", "")}
        if row is None:
            row = CustomSkillCategory.objects.create(**values)
        else:
            CustomSkillCategory.objects.filter(pk=row.pk).update(**values)
        by_id[str(row.pk)] = row
        by_name[normalize_name(item["name"])] = row


def update_skills(data: Dict[str, Any]) -> None:
    _sync_custom_categories(data.get("custom_categories") or [])
    categories = list(CustomSkillCategory.objects.all())

    def technical_values(skill):
        category = _resolve_custom_category(skill, categories)
        return {
            "name": skill["name"],
            "level": skill["level"],
            "category": category.name if category else (skill.get("category") or "Custom"),
            "custom_category": category,
        }

    _sync_named_rows(TechnicalSkill, data.get("technical") or [], technical_values)
    _sync_named_rows(SoftSkill, data.get("soft") or [], lambda s: {"name": s["name"], "level": s["level"]})


def _replace_all(model, items: List[Dict[str, Any]], fields: List[str]) -> None:
    model.objects.all().delete()
    model.objects.bulk_create([
        model(id=_uuid_or_none(item.get("id")) or uuid.uuid4(), **{f: item.get(f, "") for f in fields})
        for item in items
    ])


def update_certifications(items: List[Dict[str, Any]]) -> None:
    _replace_all(Certification, items, ["title", "issuer", "date", "certificate_url"])


def update_achievements(items: List[Dict[str, Any]]) -> None:
    _replace_all(Achievement, items, ["title", "description", "date", "issuer", "url"])


def update_settings(data: Dict[str, Any]) -> None:
    row = _singleton(SiteSettings)
    row.resume_link = data.get("resume_link", "") or ""
    row.save()


_WRITERS: Dict[str, Callable[[Any], None]] = {
    "about": update_about,
    "contact": update_contact,
    "education": update_education,
    "skills": update_skills,
    "experience": update_experience,
    "projects": update_projects,
    "certifications": update_certifications,
    "achievements": update_achievements,
    "settings": update_settings,
}


def validate_section(section: str, payload: Any):
    """Normalize and validate a client payload. Raises rest_framework ValidationError."""
    serializer_class, many = SECTION_SERIALIZERS[check_section(section)]
    serializer = serializer_class(data=normalize_section(section, payload), many=many)
    serializer.is_valid(raise_exception=True)
    _reject_repeated_ids(section, serializer.validated_data)
    return serializer


def _reject_repeated_ids(section: str, validated: Any) -> None:
    """A saved id may appear only once per payload; placeholders are exempt."""
    if section == "projects":
        records = validated.get("items") or []
    elif section in ("education", "experience", "certifications", "achievements"):
        records = validated
    else:
        return
    seen = set()
    for record in records:
        record_id = _uuid_or_none(record.get("id"))
        if record_id is None:
            continue
        if record_id in seen:
            raise ValidationError({section: [f"Duplicate id: {record_id}"]})
        seen.add(record_id)


def save_section(section: str, payload: Any) -> DataResult:
    """Persist one section and mirror it into the snapshot.

    Returns the section as stored, re-read from the database when the write
    went through so placeholder ids come back as real ones.
    """
    serializer = validate_section(section, payload)
    store = get_snapshot_store()
    warning = None
    if is_database_available():
        try:
            with transaction.atomic():
                _WRITERS[section](serializer.validated_data)
            saved = fetch_section(section)
            store.update_section(section, saved)
            if section == "about" and _contact_fields(serializer.validated_data):
                store.update_section("contact", fetch_section("contact"))
            logger.info("Saved %s section to the database", section)
            return DataResult(data=saved, source=SOURCE_DATABASE)
        except IntegrityError as e:
            # Rejected by a constraint: the payload is at fault, not the connection
            logger.warning("Rejected %s section: %s", section, e)
            raise ValidationError({section: [f"Could not save: {e}"]}) from e
        except DatabaseError as e:
            logger.error("Error saving %s section to the database: %s", section, e)
            warning = f"Saved locally only: {type(e).__name__}"
    else:
        warning = "Database unavailable; saved locally only"
    saved = _as_plain(serializer.data)
    if section == "skills":
        saved["technical"] = attach_custom_categories(saved.get("technical"), saved.get("customCategories"))
        saved["timestamp"] = int(time.time() * 1000)
    if section == "projects":
        saved["categories"] = store.get_profile_data()["projects"].get("categories", [])
    store.update_section(section, saved)
    return DataResult(data=saved, source=SOURCE_SNAPSHOT, warning=warning)


def sync_snapshot() -> Dict[str, Any]:
    """Copy the current database document into the snapshot."""
    data = fetch_portfolio_data()
    get_snapshot_store().save(data)
    logger.info("Snapshot refreshed from the database")
    return data


# ---------------------------------------------------------------------------
# Category operations
# ---------------------------------------------------------------------------


def create_custom_category(name: str, icon: str = "", color: str = "") -> CustomSkillCategory:
    name = name.strip()
    if CustomSkillCategory.objects.filter(name__iexact=name).exists():
        raise DuplicateNameError(name, kind="category")
    return CustomSkillCategory.objects.create(name=name, icon=icon or "", color=color or "")


def update_custom_category(category_id, **values) -> CustomSkillCategory:
    category = CustomSkillCategory.objects.get(pk=category_id)
    name = (values.get("name") or category.name).strip()
    if CustomSkillCategory.objects.filter(name__iexact=name).exclude(pk=category.pk).exists():
        raise DuplicateNameError(name, kind="category")
    category.name = name
    category.icon = values.get("icon", category.icon) or ""
    category.color = values.get("color", category.color) or ""
    with transaction.atomic():
        category.save()
        # Skills show the category's name, so keep it in step
        category.skills.update(category=name)
    return category


def delete_custom_category(category_id) -> None:
    """Skills keep their category text; only the link is cleared."""
    CustomSkillCategory.objects.filter(pk=category_id).delete()


def delete_project_category(category: ProjectCategory) -> None:
    try:
        category.delete()
    except ProtectedError as e:
        raise CategoryInUseError(len(e.protected_objects)) from e
