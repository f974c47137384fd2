"""
Configuration Normalization Engine

Compiles a raw configuration tree into a canonical ResumeDocument.

Two configuration schemas are accepted and are told apart by shape alone (no
version field is consulted):

- Legacy: root has both a "conf" and a "basic" key. Flat vocabulary
  (cnName, sex, overall, exp, workExperience, evaluation, ...).
- Modern: everything else. Nested site/basic blocks and seven module keys.

Design principle: normalization is a pure function of the raw tree. Missing or
wrong-typed optional fields fall back to defaults and entries without their
identifying field are dropped; nothing here raises for bad field data. A root
that is not a mapping at all is treated as an empty document.

Pipeline:
    raw tree -> is_legacy_config() -> parse_legacy_config() | parse_modern_config()
             -> ResumeDocument
"""

import re
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

from folio.contexts.intake.coercion import (
    as_list,
    as_record,
    split_tech_stack,
    to_string,
    to_string_list,
)
from folio.contexts.intake.defaults import (
    DEFAULT_NAME,
    DEFAULT_PDF_FILE_NAME,
    DEFAULT_THEME_COLOR,
    DEFAULT_TITLE,
    LEGACY_ROLE_PREFIX,
    MAPS_QUERY_URL,
    MODULE_TITLES,
)
from folio.contexts.intake.logger import log_normalization_result, log_schema_detected
from folio.contexts.intake.module_keys import resolve_module_order, resolve_module_titles
from folio.contexts.intake.sections import (
    item_section,
    normalize_education_section,
    normalize_honors_section,
    normalize_open_source_section,
    normalize_profile_section,
    normalize_projects_section,
    normalize_skills_section,
    normalize_work_section,
)
from folio.contexts.templating.resume_data_structure import (
    BasicInfo,
    Contacts,
    EducationSummary,
    ProjectItem,
    ResumeDocument,
    ResumeLink,
    SiteConfig,
    SkillsSection,
    WorkItem,
    WorkPeriod,
)

# Any of ~ ～ — – - separates the start and end of a free-text period
PERIOD_SEPARATORS = re.compile(r"[~～—–-]")

LEGACY_MARKER_KEYS = ("conf", "basic")

Parser = Callable[[Dict[str, Any]], ResumeDocument]


# =============================================================================
# Shared field helpers
# =============================================================================


def normalize_color(value: Optional[str]) -> str:
    """
    Normalize a theme color to carry a leading "#".

    Examples:
        >>> normalize_color("1a73e8")
        '#1a73e8'
        >>> normalize_color("  ")
        '#111111'
    """
    text = (value or "").strip()
    if not text:
        return DEFAULT_THEME_COLOR
    if text.startswith("#"):
        return text
    return f"#{text}"


def parse_work_period(value: Optional[str]) -> Optional[WorkPeriod]:
    """
    Split a free-text period like "2019.01~2021.06" into start and end.

    Returns None when neither side has content.
    """
    if not value:
        return None

    parts = [part.strip() for part in PERIOD_SEPARATORS.split(value)]
    start = parts[0] or None
    end = (parts[1] or None) if len(parts) > 1 else None
    if not start and not end:
        return None
    return WorkPeriod(start=start, end=end)


def join_time_range(start: Optional[str], end: Optional[str]) -> Optional[str]:
    """Join a start/end pair with " - ", or None if both are missing."""
    if not start and not end:
        return None
    return " - ".join(part for part in (start, end) if part)


def _build_site(
    title: Any, theme_color: Any, pdf_file_name: Any, order: List[Any], titles: Any
) -> SiteConfig:
    return SiteConfig(
        title=to_string(title) or DEFAULT_TITLE,
        theme_color=normalize_color(to_string(theme_color)),
        pdf_file_name=to_string(pdf_file_name) or DEFAULT_PDF_FILE_NAME,
        order=resolve_module_order(order),
        module_titles={**MODULE_TITLES, **resolve_module_titles(as_record(titles))},
    )


def _normalize_links(values: Any) -> tuple:
    links = []
    for value in as_list(values):
        source = as_record(value) or {}
        label = to_string(source.get("label"))
        url = to_string(source.get("url"))
        if label and url:
            links.append(ResumeLink(label=label, url=url))
    return tuple(links)


def _normalize_education_summary(value: Any) -> Optional[EducationSummary]:
    source = as_record(value)
    if source is None:
        return None
    summary = EducationSummary(
        school=to_string(source.get("school")),
        major=to_string(source.get("major")),
        degree=to_string(source.get("degree")),
        graduation_year=to_string(source.get("graduationYear")),
        raw=to_string(source.get("raw")),
    )
    if not summary.text:
        return None
    return summary


# =============================================================================
# Modern schema
# =============================================================================


def parse_modern_config(data: Dict[str, Any]) -> ResumeDocument:
    """Map the modern nested schema onto the canonical document."""
    site_source = as_record(data.get("site")) or {}
    basic_source = as_record(data.get("basic")) or {}
    period_source = as_record(basic_source.get("workPeriod")) or {}
    contacts_source = as_record(basic_source.get("contacts")) or {}

    site = _build_site(
        title=site_source.get("title"),
        theme_color=site_source.get("themeColor"),
        pdf_file_name=site_source.get("pdfFileName"),
        order=to_string_list(site_source.get("order")),
        titles=site_source.get("moduleTitles"),
    )

    start = to_string(period_source.get("start"))
    end = to_string(period_source.get("end"))
    basic = BasicInfo(
        name=to_string(basic_source.get("name")) or DEFAULT_NAME,
        gender=to_string(basic_source.get("gender")),
        age=to_string(basic_source.get("age")),
        position=to_string(basic_source.get("position")),
        work_period=WorkPeriod(start=start, end=end) if (start or end) else None,
        contacts=Contacts(
            phone=to_string(contacts_source.get("phone")),
            wechat=to_string(contacts_source.get("wechat")),
            email=to_string(contacts_source.get("email")),
        ),
        education_summary=_normalize_education_summary(basic_source.get("educationSummary")),
        address_links=_normalize_links(basic_source.get("addressLinks")),
    )

    return ResumeDocument(
        site=site,
        basic=basic,
        education=normalize_education_section(data.get("education")),
        skills=normalize_skills_section(data.get("skills")),
        projects=normalize_projects_section(data.get("projects")),
        profile=normalize_profile_section(data.get("profile")),
        work=normalize_work_section(data.get("work")),
        honors=normalize_honors_section(data.get("honors")),
        open_source=normalize_open_source_section(data.get("openSource")),
    )


# =============================================================================
# Legacy schema
# =============================================================================


def _first_string(source: Dict[str, Any], *keys: str) -> Optional[str]:
    """Return the first key whose value coerces to a string."""
    for key in keys:
        text = to_string(source.get(key))
        if text:
            return text
    return None


def _legacy_role_time(role: Optional[str]) -> Optional[str]:
    if role and role.startswith(LEGACY_ROLE_PREFIX):
        role = role[len(LEGACY_ROLE_PREFIX) :].strip()
    return role or None


def _legacy_address_links(basic: Dict[str, Any]) -> tuple:
    city = to_string(basic.get("city"))
    if not city:
        return ()
    url = MAPS_QUERY_URL.format(query=quote(city, safe="!*'()"))
    return (ResumeLink(label=city, url=url),)


def _legacy_projects(values: Any) -> List[ProjectItem]:
    projects = []
    for value in as_list(values):
        source = as_record(value) or {}
        name = to_string(source.get("name"))
        if not name:
            continue
        projects.append(
            ProjectItem(
                name=name,
                time=_legacy_role_time(to_string(source.get("role"))),
                description=to_string(source.get("bg")),
                responsibilities=tuple(to_string_list(source.get("des"))),
                tech_stack=tuple(split_tech_stack(source.get("stack"))),
            )
        )
    return projects


def _legacy_work_items(values: Any) -> List[WorkItem]:
    items = []
    for value in as_list(values):
        source = as_record(value) or {}
        company = to_string(source.get("company"))
        if not company:
            continue
        items.append(
            WorkItem(
                company=company,
                time=join_time_range(
                    to_string(source.get("startDate")), to_string(source.get("endDate"))
                ),
                position=to_string(source.get("position")),
                achievements=tuple(to_string_list(source.get("responsibilities"))),
            )
        )
    return items


def parse_legacy_config(data: Dict[str, Any]) -> ResumeDocument:
    """
    Map the legacy flat schema onto the canonical document.

    conf.modules doubles as order (its keys) and module titles (its values).
    Honors and open-source sections share the modern normalizers. The legacy
    schema has no structured education; basic.college becomes the education
    summary fallback instead.
    """
    conf = as_record(data.get("conf")) or {}
    basic_source = as_record(data.get("basic")) or {}
    modules = as_record(conf.get("modules")) or {}

    site = _build_site(
        title=conf.get("title"),
        theme_color=conf.get("mainThemeColor"),
        pdf_file_name=conf.get("pdf"),
        order=list(modules.keys()),
        titles=modules,
    )

    college = to_string(basic_source.get("college"))
    basic = BasicInfo(
        name=to_string(basic_source.get("cnName")) or DEFAULT_NAME,
        gender=to_string(basic_source.get("sex")),
        age=to_string(basic_source.get("birth")),
        position=to_string(basic_source.get("objective")),
        work_period=parse_work_period(to_string(basic_source.get("overall"))),
        contacts=Contacts(
            phone=_first_string(basic_source, "phone", "phoneNumber"),
            wechat=_first_string(basic_source, "wechat", "wechatText"),
            email=_first_string(basic_source, "email", "emailText"),
        ),
        education_summary=EducationSummary(raw=college) if college else None,
        address_links=_legacy_address_links(basic_source),
    )

    skills = to_string_list(data.get("skill"))
    profile = to_string(data.get("evaluation"))

    return ResumeDocument(
        site=site,
        basic=basic,
        education=None,
        skills=SkillsSection(items=tuple(skills)) if skills else None,
        projects=item_section(_legacy_projects(data.get("exp"))),
        profile=normalize_profile_section(profile),
        work=item_section(_legacy_work_items(data.get("workExperience"))),
        honors=normalize_honors_section(data.get("honors")),
        open_source=normalize_open_source_section(data.get("openSource")),
    )


# =============================================================================
# Schema selection
# =============================================================================


def is_legacy_config(raw: Any) -> bool:
    """True when the root mapping carries both legacy marker keys."""
    data = as_record(raw)
    if data is None:
        return False
    return all(key in data for key in LEGACY_MARKER_KEYS)


def select_parser(raw: Any) -> Parser:
    """Pick the parser variant for a raw tree. Ambiguous shapes resolve to legacy."""
    if is_legacy_config(raw):
        return parse_legacy_config
    return parse_modern_config


def normalize_config(raw: Any) -> ResumeDocument:
    """
    Compile a raw configuration tree into a canonical ResumeDocument.

    Args:
        raw: Parsed YAML tree of either schema (anything else is treated as empty)

    Returns:
        Canonical, immutable ResumeDocument

    Example:
        >>> doc = normalize_config({"conf": {"title": "T"}, "basic": {"cnName": "N"}})
        >>> doc.site.title, doc.basic.name
        ('T', 'N')
    """
    data = as_record(raw) or {}
    parser = select_parser(data)
    log_schema_detected("legacy" if parser is parse_legacy_config else "modern")

    document = parser(data)
    log_normalization_result(document)
    return document
