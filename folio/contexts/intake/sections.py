"""
Per-module section normalizers.

Every module accepts either a bare list of entries or a wrapper mapping
`{enabled: bool, items: [...]}` (enabled defaults to true). Entries missing
their identifying field are dropped, and a section left without entries is
returned as None rather than empty. These rules are schema-agnostic: the
legacy parser reuses them for honors and open-source sections.
"""

from typing import Any, Callable, List, Optional, Tuple

from folio.contexts.intake.coercion import (
    as_list,
    as_record,
    split_tech_stack,
    to_bool,
    to_string,
    to_string_list,
)
from folio.contexts.intake.logger import log_dropped_entry
from folio.contexts.templating.resume_data_structure import (
    EducationCourse,
    EducationItem,
    HonorItem,
    ItemSection,
    OpenSourceItem,
    ProfileSection,
    ProjectItem,
    SkillsSection,
    WorkItem,
)


def _unwrap(value: Any) -> Tuple[Optional[dict], Any]:
    """Split a section value into (wrapper mapping or None, raw items)."""
    section = as_record(value)
    if section is None:
        return None, value
    items = section.get("items")
    return section, value if items is None else items


def _is_enabled(section: Optional[dict]) -> bool:
    return to_bool(section.get("enabled") if section else None, True)


def _build_item_section(
    value: Any,
    module: str,
    build_item: Callable[[Any], Optional[Any]],
) -> Optional[ItemSection]:
    """Run build_item over every raw entry and wrap the survivors."""
    if not value:
        return None

    section, raw_items = _unwrap(value)
    items = []
    for index, raw_item in enumerate(as_list(raw_items)):
        item = build_item(raw_item)
        if item is None:
            log_dropped_entry(module, index)
            continue
        items.append(item)

    if not items:
        return None
    return ItemSection(items=tuple(items), enabled=_is_enabled(section))


# =============================================================================
# Entry builders
# =============================================================================


def _build_course(value: Any) -> Optional[EducationCourse]:
    source = as_record(value) or {}
    name = to_string(source.get("name")) or to_string(value)
    if not name:
        return None
    return EducationCourse(name=name, credit=to_string(source.get("credit")))


def build_education_item(value: Any) -> Optional[EducationItem]:
    source = as_record(value) or {}
    school = to_string(source.get("school"))
    if not school:
        return None

    courses = [_build_course(course) for course in as_list(source.get("courses"))]
    return EducationItem(
        school=school,
        start=to_string(source.get("start")),
        end=to_string(source.get("end")),
        gpa=to_string(source.get("gpa")),
        major=to_string(source.get("major")),
        courses=tuple(course for course in courses if course is not None),
        rank=to_string(source.get("rank")),
        degree=to_string(source.get("degree")),
    )


def build_project_item(value: Any) -> Optional[ProjectItem]:
    source = as_record(value) or {}
    name = to_string(source.get("name"))
    if not name:
        return None
    return ProjectItem(
        name=name,
        time=to_string(source.get("time")),
        description=to_string(source.get("description")),
        responsibilities=tuple(to_string_list(source.get("responsibilities"))),
        tech_stack=tuple(split_tech_stack(source.get("techStack"))),
    )


def build_work_item(value: Any) -> Optional[WorkItem]:
    source = as_record(value) or {}
    company = to_string(source.get("company"))
    if not company:
        return None
    return WorkItem(
        company=company,
        time=to_string(source.get("time")),
        position=to_string(source.get("position")),
        achievements=tuple(to_string_list(source.get("achievements"))),
    )


def build_honor_item(value: Any) -> Optional[HonorItem]:
    # A bare string entry is the honor's name
    source = as_record(value) or {}
    name = to_string(source.get("name")) or to_string(value)
    if not name:
        return None
    return HonorItem(name=name, time=to_string(source.get("time")))


def build_open_source_item(value: Any) -> Optional[OpenSourceItem]:
    source = as_record(value) or {}
    name = to_string(source.get("name"))
    if not name:
        return None
    return OpenSourceItem(
        name=name,
        url=to_string(source.get("url")),
        stars=to_string(source.get("stars")),
        description=to_string(source.get("description")),
        achievements=tuple(to_string_list(source.get("achievements"))),
    )


# =============================================================================
# Section normalizers
# =============================================================================


def normalize_education_section(value: Any) -> Optional[ItemSection]:
    return _build_item_section(value, "education", build_education_item)


def normalize_projects_section(value: Any) -> Optional[ItemSection]:
    return _build_item_section(value, "projects", build_project_item)


def normalize_work_section(value: Any) -> Optional[ItemSection]:
    return _build_item_section(value, "work", build_work_item)


def normalize_honors_section(value: Any) -> Optional[ItemSection]:
    return _build_item_section(value, "honors", build_honor_item)


def normalize_open_source_section(value: Any) -> Optional[ItemSection]:
    return _build_item_section(value, "openSource", build_open_source_item)


def normalize_skills_section(value: Any) -> Optional[SkillsSection]:
    """
    Normalize the skills section.

    Items may be a list or a single string. The list renders ordered when
    `ordered: true` or `listStyle: ordered` (case-insensitive); `hideIndex`
    keeps list semantics but suppresses visible numbering.
    """
    if not value:
        return None

    section, raw_items = _unwrap(value)
    items = to_string_list(raw_items)
    if not items:
        return None

    section = section or {}
    list_style = (to_string(section.get("listStyle")) or "").lower()
    return SkillsSection(
        items=tuple(items),
        enabled=_is_enabled(section),
        ordered=list_style == "ordered" or to_bool(section.get("ordered"), False),
        hide_index=to_bool(section.get("hideIndex"), False),
    )


def normalize_profile_section(value: Any) -> Optional[ProfileSection]:
    """Normalize the profile section from a string or `{enabled, content}`."""
    if not value:
        return None

    section = as_record(value)
    content = to_string(section.get("content") if section is not None else value)
    if not content:
        return None
    return ProfileSection(content=content, enabled=_is_enabled(section))


def item_section(items: List[Any]) -> Optional[ItemSection]:
    """Wrap pre-built entries as an enabled section, or None when there are none."""
    if not items:
        return None
    return ItemSection(items=tuple(items))
