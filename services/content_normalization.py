from typing import Any, Dict, List, Optional, Set

from schemas.content import ContentItem
from schemas.imports import ItemKind, Section, SkillCategory


def _slugify(value: str) -> str:
    clean = "".join(char if char.isalnum() else "-" for char in value.lower())
    while "--" in clean:
        clean = clean.replace("--", "-")
    return clean.strip("-")


def _as_str_list(value: Any) -> List[str]:
    if isinstance(value, list):
        return [str(item) for item in value if item is not None and str(item).strip()]
    if isinstance(value, str) and value.strip():
        return [part.strip() for part in value.split(",") if part.strip()]
    return []


def _coerce_category(value: Any) -> Optional[SkillCategory]:
    if isinstance(value, SkillCategory):
        return value
    if not value:
        return None
    try:
        return SkillCategory(str(value).strip().lower())
    except ValueError:
        return None


def normalize_certification(entry: Dict[str, Any]) -> Dict[str, Any]:
    issuer = entry.get("issuer") or entry.get("org") or ""
    cert_type = entry.get("type")
    return {
        "id": entry.get("id") or "",
        "kind": ItemKind.CERTIFICATION,
        "title": entry.get("title") or "",
        "subtitle": issuer or None,
        "description": entry.get("description") or "",
        "tags": _as_str_list(entry.get("tags")) or _as_str_list(cert_type),
        "date": entry.get("date"),
        "link": entry.get("credentialUrl") or entry.get("link"),
    }


def normalize_experience_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": entry.get("id") or "",
        "kind": ItemKind.EXPERIENCE,
        "title": entry.get("title") or entry.get("role") or "",
        "subtitle": entry.get("company"),
        "description": entry.get("description") or "",
        "tags": _as_str_list(entry.get("skills")) or _as_str_list(entry.get("tags")),
        "date": entry.get("period") or entry.get("date"),
        "link": entry.get("link"),
    }


def normalize_project_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    title = entry.get("title") or entry.get("name") or ""
    return {
        "id": entry.get("id") or "",
        "kind": ItemKind.PROJECT,
        "title": title,
        "description": entry.get("description") or "",
        "tags": _as_str_list(entry.get("technologies")) or _as_str_list(entry.get("tags")),
        "link": entry.get("link") or entry.get("url") or entry.get("github"),
    }


def normalize_skill_group(entry: Dict[str, Any]) -> Dict[str, Any]:
    raw_skills = entry.get("skills") or entry.get("items") or []
    if isinstance(raw_skills, str):
        raw_skills = _as_str_list(raw_skills)
    elif not isinstance(raw_skills, list):
        raw_skills = []
    skills = []
    for skill in raw_skills:
        if isinstance(skill, dict) and skill.get("name"):
            skills.append({"name": skill["name"], "level": int(skill.get("level") or 0)})
        elif isinstance(skill, str) and skill.strip():
            skills.append({"name": skill.strip(), "level": 0})
    return {
        "id": entry.get("id") or "",
        "kind": ItemKind.SKILL_GROUP,
        "title": entry.get("title") or "",
        "description": entry.get("description") or "",
        "tags": [skill["name"] for skill in skills],
        "category": _coerce_category(entry.get("category")),
        "skills": skills,
    }


_NORMALIZERS = {
    Section.CERTIFICATIONS: normalize_certification,
    Section.EXPERIENCE: normalize_experience_entry,
    Section.PROJECTS: normalize_project_entry,
    Section.SKILLS: normalize_skill_group,
}


def normalize_collection(section: Section, records: List[Any]) -> List[ContentItem]:
    """Maps raw records onto ContentItem, assigning stable unique ids.

    Records without an id get one slugified from their title; duplicate ids
    within the collection are suffixed with the first free -2, -3, ... in order.
    """
    normalizer = _NORMALIZERS[Section(section)]
    items: List[ContentItem] = []
    taken: Set[str] = set()
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            continue
        data = normalizer(record)
        title = data["title"] if isinstance(data["title"], str) else ""
        base_id = str(data["id"]).strip() or _slugify(title) or f"{Section(section).value}-{position}"
        candidate = base_id
        suffix = 1
        while candidate in taken:
            suffix += 1
            candidate = f"{base_id}-{suffix}"
        taken.add(candidate)
        data["id"] = candidate
        items.append(ContentItem(**data))
    return items
