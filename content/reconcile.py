"""Shape normalization and merging for ProfileData documents.

Everything here works on plain dicts and lists so the same routines apply to
database rows, the JSON snapshot and admin payloads alike.
"""

import copy
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from rest_framework.exceptions import ValidationError

from .defaults import SECTIONS
from .exceptions import UnknownSectionError

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def normalize_name(name: Any) -> str:
    return str(name or "").strip().lower()


def dedupe_by_name(items: Iterable[Dict[str, Any]], key: str = "name") -> List[Dict[str, Any]]:
    """Keep the first item for each case-insensitive, trimmed name."""
    unique: List[Dict[str, Any]] = []
    seen = set()
    for item in items or []:
        normalized = normalize_name(item.get(key))
        if normalized in seen:
            logger.info("Duplicate %s removed: %s", key, item.get(key))
            continue
        seen.add(normalized)
        unique.append(item)
    return unique


def find_duplicate_name(items: Iterable[Dict[str, Any]], name: str, exclude_id: Any = None) -> Optional[Dict[str, Any]]:
    target = normalize_name(name)
    for item in items or []:
        if exclude_id is not None and str(item.get("id")) == str(exclude_id):
            continue
        if normalize_name(item.get("name")) == target:
            return item
    return None


def format_date_if_needed(value: Optional[str]) -> str:
    """Turn ``YYYY-MM`` into ``Month YYYY``; anything else is returned as is."""
    if not value:
        return ""
    if " " in value:
        return value
    parts = value.split("-")
    if len(parts) != 2:
        return value
    year, month = parts
    try:
        index = int(month) - 1
    except ValueError:
        return value
    if index < 0 or index >= 12:
        return value
    return f"{MONTH_NAMES[index]} {year}"


def coerce_level(value: Any) -> int:
    try:
        level = int(float(value))
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, level))


def is_placeholder_id(value: Any) -> bool:
    """True for ids minted client-side before the record was ever saved."""
    if value is None:
        return True
    text = str(value).strip()
    if not text or text.startswith("new-"):
        return True
    try:
        uuid.UUID(text)
    except ValueError:
        return True
    return False


def attach_custom_categories(technical: Iterable[Dict[str, Any]], categories: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    by_id = {str(cat.get("id")): cat for cat in categories or []}
    result = []
    for skill in technical or []:
        cat_id = skill.get("custom_category_id")
        category = None
        if cat_id:
            category = skill.get("customCategory") or by_id.get(str(cat_id))
        base = {"id": skill.get("id"), "name": skill.get("name", ""), "level": coerce_level(skill.get("level"))}
        if category:
            base.update({
                "category": category.get("name") or "Custom",
                "custom_category_id": str(cat_id),
                "customCategory": {
                    "id": str(category.get("id")),
                    "name": category.get("name"),
                    "icon": category.get("icon") or "",
                    "color": category.get("color") or "",
                },
            })
        else:
            base.update({
                "category": skill.get("category") or "Other",
                "custom_category_id": None,
                "customCategory": None,
            })
        result.append(base)
    return result


def _pick(item: Dict[str, Any], *keys: str, default: Any = "") -> Any:
    for key in keys:
        if key in item and item[key] is not None:
            return item[key]
    return default


def _str_list(values: Any) -> List[str]:
    if isinstance(values, str):
        values = [values]
    elif values is not None and not isinstance(values, (list, tuple)):
        raise ValidationError("Expected a list of strings.")
    return [str(v).strip() for v in values or [] if str(v).strip()]


def _normalize_about(data):
    data = data or {}
    out = {
        "bio": _pick(data, "bio"),
        "name": _pick(data, "name"),
        "image_url": _pick(data, "image_url", "imageUrl", "image"),
    }
    # The about form may also carry contact details
    for key in ("email", "phone", "location"):
        if data.get(key):
            out[key] = data[key]
    return out


def _normalize_contact(data):
    data = data or {}
    return {key: _pick(data, key) for key in ("email", "phone", "location")}


def _normalize_education(items):
    return [
        {
            "id": _pick(item, "id", default=None),
            "degree": _pick(item, "degree"),
            "institution": _pick(item, "institution"),
            "location": _pick(item, "location"),
            "startYear": str(_pick(item, "startYear", "start_year")),
            "endYear": str(_pick(item, "endYear", "end_year")),
            "grade": _pick(item, "grade"),
            "specialization": _pick(item, "specialization"),
        }
        for item in items or []
    ]


def _normalize_experience(items):
    return [
        {
            "id": _pick(item, "id", default=None),
            "title": _pick(item, "title"),
            "company": _pick(item, "company"),
            "location": _pick(item, "location"),
            "startDate": _pick(item, "startDate", "start_date"),
            "endDate": _pick(item, "endDate", "end_date"),
            "current": bool(_pick(item, "current", default=False)),
            "description": _str_list(_pick(item, "description", "descriptions", default=[])),
        }
        for item in items or []
    ]


def _normalize_skill(item, technical):
    out = {
        "id": _pick(item, "id", default=None),
        "name": str(_pick(item, "name")).strip(),
        "level": coerce_level(_pick(item, "level", default=0)),
    }
    if technical:
        custom = item.get("customCategory") or item.get("custom_category") or None
        out["category"] = _pick(item, "category", default="") or ""
        out["custom_category_id"] = _pick(item, "custom_category_id", default=None) or (custom or {}).get("id")
    return out


def _normalize_skills(data):
    if isinstance(data, list):
        data = {"technical": data}
    data = data or {}
    return {
        "technical": [_normalize_skill(s, True) for s in data.get("technical") or []],
        "soft": [_normalize_skill(s, False) for s in data.get("soft") or []],
        "customCategories": [
            {
                "id": _pick(cat, "id", default=None),
                "name": str(_pick(cat, "name")).strip(),
                "icon": _pick(cat, "icon"),
                "color": _pick(cat, "color"),
            }
            for cat in data.get("customCategories") or data.get("custom_categories") or []
        ],
    }


def _normalize_projects(data):
    if isinstance(data, list):
        data = {"items": data}
    data = data or {}
    items = []
    for item in data.get("items") or []:
        category_id = _pick(item, "category_id", "categoryId", default=None)
        try:
            category_id = int(category_id) if category_id not in (None, "") else None
        except (TypeError, ValueError):
            category_id = None
        items.append({
            "id": _pick(item, "id", default=None),
            "title": _pick(item, "title"),
            "category": _pick(item, "category"),
            "category_id": category_id,
            "projectType": _pick(item, "projectType", "project_type"),
            "teamType": _pick(item, "teamType", "team_type") or "solo",
            "description": _pick(item, "description"),
            "features": _str_list(_pick(item, "features", default=[])),
            "technologies": _str_list(_pick(item, "technologies", default=[])),
            "image": _pick(item, "image", "image_url"),
            "github": _pick(item, "github"),
            "demo": _pick(item, "demo"),
            "linkedin": _pick(item, "linkedin"),
            "date": _pick(item, "date"),
        })
    categories = [
        {"id": cat.get("id"), "name": str(cat.get("name") or "").strip()}
        for cat in data.get("categories") or []
    ]
    return {"items": items, "categories": categories}


def _normalize_certifications(items):
    return [
        {
            "id": _pick(item, "id", default=None),
            "title": _pick(item, "title"),
            "issuer": _pick(item, "issuer"),
            "date": _pick(item, "date"),
            "certificateUrl": _pick(item, "certificateUrl", "certificate_url"),
        }
        for item in items or []
    ]


def _normalize_achievements(items):
    return [
        {key: _pick(item, key, default=None if key == "id" else "")
         for key in ("id", "title", "description", "date", "issuer", "url")}
        for item in items or []
    ]


def _normalize_settings(data):
    data = data or {}
    return {"resumeLink": _pick(data, "resumeLink", "resume_link")}


_NORMALIZERS = {
    "about": _normalize_about,
    "contact": _normalize_contact,
    "education": _normalize_education,
    "skills": _normalize_skills,
    "experience": _normalize_experience,
    "projects": _normalize_projects,
    "certifications": _normalize_certifications,
    "achievements": _normalize_achievements,
    "settings": _normalize_settings,
}


def check_section(section: str) -> str:
    if section not in SECTIONS:
        raise UnknownSectionError(section)
    return section


_OBJECT_SECTIONS = ("about", "contact", "settings")
_LIST_SECTIONS = ("education", "experience", "certifications", "achievements")


def _require_object(value: Any, label: str) -> None:
    if value is not None and not isinstance(value, dict):
        raise ValidationError({label: ["Expected an object."]})


def _require_records(value: Any, label: str) -> None:
    if value is None:
        return
    if not isinstance(value, list):
        raise ValidationError({label: ["Expected a list of objects."]})
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise ValidationError({label: [f"Item {index} must be an object."]})


def check_payload_shape(section: str, payload: Any) -> None:
    """Reject bodies whose containers are the wrong type before they are normalized."""
    if section in _OBJECT_SECTIONS:
        _require_object(payload, section)
    elif section in _LIST_SECTIONS:
        _require_records(payload, section)
    elif section == "skills":
        if isinstance(payload, list):
            payload = {"technical": payload}
        _require_object(payload, section)
        payload = payload or {}
        for key in ("technical", "soft", "customCategories", "custom_categories"):
            _require_records(payload.get(key), key)
        for skill in payload.get("technical") or []:
            _require_object(skill.get("customCategory"), "customCategory")
            _require_object(skill.get("custom_category"), "custom_category")
    elif section == "projects":
        if isinstance(payload, list):
            payload = {"items": payload}
        _require_object(payload, section)
        payload = payload or {}
        _require_records(payload.get("items"), "items")
        _require_records(payload.get("categories"), "categories")


def normalize_section(section: str, payload: Any) -> Any:
    """Canonical camelCase shape for one section, whatever aliases the client used."""
    check_payload_shape(check_section(section), payload)
    return _NORMALIZERS[section](payload)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, dict):
        # A section dict counts as empty when every member is empty
        return all(_is_empty(v) for k, v in value.items() if k != "timestamp")
    if isinstance(value, (list, str)):
        return len(value) == 0
    return False


def merge_profile_data(primary: Optional[Dict[str, Any]], fallback: Dict[str, Any]) -> Dict[str, Any]:
    """Fill every missing or empty section of ``primary`` from ``fallback``."""
    merged = copy.deepcopy(fallback)
    for section, value in (primary or {}).items():
        if section in SECTIONS and _is_empty(value):
            continue
        merged[section] = copy.deepcopy(value)
    return merged
