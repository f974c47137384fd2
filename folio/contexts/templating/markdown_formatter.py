"""
Markdown export of a ResumeDocument.

Produces a heading-structured plain-text resume for copy-paste reuse. Module
order and per-field formatting mirror the rendered HTML view; contact values
are written unmasked.

Output is deterministic for a fixed `today` (only the working-experience
duration depends on the current date).
"""

from datetime import date
from typing import Callable, Dict, List, Optional

from folio.contexts.templating.labels import LABEL_SEP, LABELS
from folio.contexts.templating.resume_data_structure import (
    ItemSection,
    ProfileSection,
    ResumeDocument,
    SkillsSection,
)
from folio.utils.timestamp import experience_text


def _field(label_key: str, value: str) -> str:
    return f"{LABELS[label_key]}{LABEL_SEP}{value}"


def _with_time(text: str, time: Optional[str]) -> str:
    return f"{text} ({time})" if time else text


def format_basic_markdown(document: ResumeDocument, today: Optional[date] = None) -> List[str]:
    """
    Format the header and basic-information list.

    The education summary line appears only when no structured education
    section will be shown.
    """
    basic = document.basic
    lines = [f"# {basic.name}"]
    if basic.position:
        lines.extend(["", f"> {basic.position}"])

    lines.extend(["", f"## {LABELS['basic_info']}"])

    if basic.gender:
        lines.append(f"- {_field('gender', basic.gender)}")
    if basic.age:
        lines.append(f"- {_field('age', basic.age)}")

    if basic.work_period:
        experience = experience_text(basic.work_period.start, basic.work_period.end, today)
        if experience:
            lines.append(f"- {_field('experience', experience)}")

    contacts = basic.contacts
    if contacts.phone:
        lines.append(
            f"- {_field('phone', contacts.phone)} ([{LABELS['call']}](tel:{contacts.phone}))"
        )
    if contacts.wechat:
        lines.append(f"- {_field('wechat', contacts.wechat)}")
    if contacts.email:
        lines.append(
            f"- {_field('email', contacts.email)} "
            f"([{LABELS['send_email']}](mailto:{contacts.email}))"
        )

    if basic.address_links:
        links = " / ".join(f"[{link.label}]({link.url})" for link in basic.address_links)
        lines.append(f"- {_field('links', links)}")

    if document.education_fallback:
        lines.append(f"- {_field('education', document.education_fallback)}")

    return lines


def format_education_markdown(section: ItemSection, title: str) -> List[str]:
    lines = ["", f"## {title}"]
    for item in section.items:
        period = f" ({item.period})" if item.period else ""
        lines.append(f"- **{item.school}**{period}")

        details = [
            _field("degree", item.degree) if item.degree else "",
            _field("major", item.major) if item.major else "",
            _field("gpa", item.gpa) if item.gpa else "",
            _field("rank", item.rank) if item.rank else "",
        ]
        detail_line = "，".join(detail for detail in details if detail)
        if detail_line:
            lines.append(f"  - {detail_line}")

        for course in item.courses:
            credit = f"（{course.credit} {LABELS['credit']}）" if course.credit else ""
            lines.append(f"  - {_field('course', course.name)}{credit}")
    return lines


def format_skills_markdown(section: SkillsSection, title: str) -> List[str]:
    """Numbered list when ordered and not hidden, bullets otherwise."""
    lines = ["", f"## {title}"]
    for index, skill in enumerate(section.items, 1):
        marker = f"{index}." if section.show_index else "-"
        lines.append(f"{marker} {skill}")
    return lines


def format_projects_markdown(section: ItemSection, title: str) -> List[str]:
    lines = ["", f"## {title}"]
    for item in section.items:
        lines.append(_with_time(f"- **{item.name}**", item.time))
        if item.description:
            lines.append(f"  - {_field('description', item.description)}")
        lines.extend(f"  - {entry}" for entry in item.responsibilities)
        if item.tech_stack:
            lines.append(f"  - {_field('tech_stack', ' / '.join(item.tech_stack))}")
    return lines


def format_profile_markdown(section: ProfileSection, title: str) -> List[str]:
    return ["", f"## {title}", "", section.content]


def format_work_markdown(section: ItemSection, title: str) -> List[str]:
    lines = ["", f"## {title}"]
    for item in section.items:
        lines.append(_with_time(f"- **{item.company}**", item.time))
        if item.position:
            lines.append(f"  - {_field('position', item.position)}")
        lines.extend(f"  - {entry}" for entry in item.achievements)
    return lines


def format_honors_markdown(section: ItemSection, title: str) -> List[str]:
    lines = ["", f"## {title}"]
    lines.extend(_with_time(f"- {item.name}", item.time) for item in section.items)
    return lines


def format_open_source_markdown(section: ItemSection, title: str) -> List[str]:
    lines = ["", f"## {title}"]
    for item in section.items:
        name = f"[{item.name}]({item.url})" if item.url else item.name
        stars = f" (⭐ {item.stars})" if item.stars else ""
        lines.append(f"- {name}{stars}")
        if item.description:
            lines.append(f"  - {_field('description', item.description)}")
        lines.extend(f"  - {entry}" for entry in item.achievements)
    return lines


SECTION_FORMATTERS: Dict[str, Callable[..., List[str]]] = {
    "education": format_education_markdown,
    "skills": format_skills_markdown,
    "projects": format_projects_markdown,
    "profile": format_profile_markdown,
    "work": format_work_markdown,
    "honors": format_honors_markdown,
    "openSource": format_open_source_markdown,
}


def format_resume_markdown(document: ResumeDocument, today: Optional[date] = None) -> str:
    """
    Serialize a ResumeDocument to markdown.

    Sections follow site.order; disabled or absent sections are skipped.

    Args:
        document: Canonical resume
        today: Reference date for the working-experience duration

    Returns:
        Markdown text (no trailing newline)
    """
    lines = format_basic_markdown(document, today)

    for module in document.site.order:
        section = document.visible_section(module)
        if section is None:
            continue
        lines.extend(SECTION_FORMATTERS[module](section, document.site.title_for(module)))

    return "\n".join(lines)
