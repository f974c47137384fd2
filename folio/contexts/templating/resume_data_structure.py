"""
Resume Document Structure

Defines the canonical, schema-independent representation of a resume.
This structure is the interface between the Intake, Templating and Rendering
contexts.

Intake owns:
- Building ResumeDocument instances from raw configuration (either schema)

Templating reads ResumeDocument instances to produce markdown and HTML.
Rendering reads the site block for export settings.

A ResumeDocument is immutable once produced. Module sections are either absent
(None) or hold at least one item; they are never empty.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None values so serialized documents only carry present fields."""
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class SiteConfig:
    """
    Site-level settings.

    Attributes:
        title: Page/document title
        theme_color: Theme color, always with a leading "#"
        pdf_file_name: Output file name for PDF export
        order: All seven module identifiers, each exactly once
        module_titles: Display title per module identifier (read-only)
    """

    title: str
    theme_color: str
    pdf_file_name: str
    order: Tuple[str, ...]
    module_titles: Mapping[str, str] = field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, "module_titles", MappingProxyType(dict(self.module_titles)))

    def title_for(self, module: str) -> str:
        return self.module_titles.get(module, module)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "themeColor": self.theme_color,
            "pdfFileName": self.pdf_file_name,
            "order": list(self.order),
            "moduleTitles": dict(self.module_titles),
        }


@dataclass(frozen=True)
class WorkPeriod:
    start: Optional[str] = None
    end: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"start": self.start, "end": self.end})


@dataclass(frozen=True)
class Contacts:
    phone: Optional[str] = None
    wechat: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"phone": self.phone, "wechat": self.wechat, "email": self.email})


@dataclass(frozen=True)
class EducationSummary:
    """
    One-line education fallback shown only when no structured education
    section is present. `raw` takes precedence over the individual fields.
    """

    school: Optional[str] = None
    major: Optional[str] = None
    degree: Optional[str] = None
    graduation_year: Optional[str] = None
    raw: Optional[str] = None

    @property
    def text(self) -> str:
        if self.raw:
            return self.raw
        parts = [self.school, self.major, self.degree, self.graduation_year]
        return " · ".join(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "school": self.school,
                "major": self.major,
                "degree": self.degree,
                "graduationYear": self.graduation_year,
                "raw": self.raw,
            }
        )


@dataclass(frozen=True)
class ResumeLink:
    label: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "url": self.url}


@dataclass(frozen=True)
class BasicInfo:
    """Personal header block: name, role, contacts and links."""

    name: str
    gender: Optional[str] = None
    age: Optional[str] = None
    position: Optional[str] = None
    work_period: Optional[WorkPeriod] = None
    contacts: Contacts = field(default_factory=Contacts)
    education_summary: Optional[EducationSummary] = None
    address_links: Tuple[ResumeLink, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "gender": self.gender,
                "age": self.age,
                "position": self.position,
                "workPeriod": self.work_period.to_dict() if self.work_period else None,
                "contacts": self.contacts.to_dict(),
                "educationSummary": (
                    self.education_summary.to_dict() if self.education_summary else None
                ),
                "addressLinks": [link.to_dict() for link in self.address_links],
            }
        )


# =============================================================================
# Module entries
# =============================================================================


@dataclass(frozen=True)
class EducationCourse:
    name: str
    credit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "credit": self.credit})


@dataclass(frozen=True)
class EducationItem:
    school: str
    start: Optional[str] = None
    end: Optional[str] = None
    gpa: Optional[str] = None
    major: Optional[str] = None
    courses: Tuple[EducationCourse, ...] = ()
    rank: Optional[str] = None
    degree: Optional[str] = None

    @property
    def period(self) -> str:
        """"start - end" when either bound is known, else ""."""
        if not (self.start or self.end):
            return ""
        return f"{self.start or ''} - {self.end or ''}"

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "school": self.school,
                "start": self.start,
                "end": self.end,
                "gpa": self.gpa,
                "major": self.major,
                "courses": [course.to_dict() for course in self.courses],
                "rank": self.rank,
                "degree": self.degree,
            }
        )


@dataclass(frozen=True)
class ProjectItem:
    name: str
    time: Optional[str] = None
    description: Optional[str] = None
    responsibilities: Tuple[str, ...] = ()
    tech_stack: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "time": self.time,
                "description": self.description,
                "responsibilities": list(self.responsibilities),
                "techStack": list(self.tech_stack),
            }
        )


@dataclass(frozen=True)
class WorkItem:
    company: str
    time: Optional[str] = None
    position: Optional[str] = None
    achievements: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "company": self.company,
                "time": self.time,
                "position": self.position,
                "achievements": list(self.achievements),
            }
        )


@dataclass(frozen=True)
class HonorItem:
    name: str
    time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "time": self.time})


@dataclass(frozen=True)
class OpenSourceItem:
    name: str
    url: Optional[str] = None
    stars: Optional[str] = None
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "url": self.url,
                "stars": self.stars,
                "description": self.description,
                "achievements": list(self.achievements),
            }
        )


# =============================================================================
# Module sections
# =============================================================================


@dataclass(frozen=True)
class ItemSection:
    """A module section holding at least one typed entry."""

    items: Tuple[Any, ...]
    enabled: bool = True

    @property
    def is_visible(self) -> bool:
        return self.enabled and len(self.items) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class SkillsSection:
    items: Tuple[str, ...]
    enabled: bool = True
    ordered: bool = False
    hide_index: bool = False

    @property
    def is_visible(self) -> bool:
        return self.enabled and len(self.items) > 0

    @property
    def show_index(self) -> bool:
        """Numbering is visible only for ordered lists without hideIndex."""
        return self.ordered and not self.hide_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "ordered": self.ordered,
            "hideIndex": self.hide_index,
            "items": list(self.items),
        }


@dataclass(frozen=True)
class ProfileSection:
    content: str
    enabled: bool = True

    @property
    def is_visible(self) -> bool:
        return self.enabled and bool(self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {"enabled": self.enabled, "content": self.content}


# Module identifier -> ResumeDocument attribute
MODULE_ATTRIBUTES = {
    "education": "education",
    "skills": "skills",
    "projects": "projects",
    "profile": "profile",
    "work": "work",
    "honors": "honors",
    "openSource": "open_source",
}


@dataclass(frozen=True)
class ResumeDocument:
    """
    Canonical resume document produced by the normalization engine.

    Produced once per configuration load and never mutated. Serializes back to
    the modern configuration schema via to_dict(), so normalizing that output
    reproduces an equal document.
    """

    site: SiteConfig
    basic: BasicInfo
    education: Optional[ItemSection] = None
    skills: Optional[SkillsSection] = None
    projects: Optional[ItemSection] = None
    profile: Optional[ProfileSection] = None
    work: Optional[ItemSection] = None
    honors: Optional[ItemSection] = None
    open_source: Optional[ItemSection] = None

    def section(self, module: str):
        """Return the section for a module identifier (None when absent)."""
        return getattr(self, MODULE_ATTRIBUTES[module])

    def visible_section(self, module: str):
        """Return the section only if it exists and is enabled with content."""
        section = self.section(module)
        if section is not None and section.is_visible:
            return section
        return None

    @property
    def has_structured_education(self) -> bool:
        return self.visible_section("education") is not None

    @property
    def education_fallback(self) -> str:
        """
        Education summary text to display, honoring display precedence.

        Empty whenever a structured education section will be shown.
        """
        if self.has_structured_education or self.basic.education_summary is None:
            return ""
        return self.basic.education_summary.text

    def to_dict(self) -> Dict[str, Any]:
        data = {"site": self.site.to_dict(), "basic": self.basic.to_dict()}
        for module, attribute in MODULE_ATTRIBUTES.items():
            section = getattr(self, attribute)
            if section is not None:
                data[module] = section.to_dict()
        return data
