"""
Default values for the canonical resume document.

Shared by the normalization engine (fallbacks for missing fields) and the
templating context (labels).
"""

from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_TITLE = "个人简历"
DEFAULT_NAME = "未命名"
DEFAULT_THEME_COLOR = "#111111"
DEFAULT_PDF_FILE_NAME = "resume.pdf"

# Canonical module identifiers, in default display order
DEFAULT_ORDER: Tuple[str, ...] = (
    "education",
    "skills",
    "projects",
    "profile",
    "work",
    "honors",
    "openSource",
)

MODULE_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "education": "教育经历",
        "skills": "专业技能",
        "projects": "项目经历",
        "profile": "自我描述",
        "work": "工作经历",
        "honors": "荣誉",
        "openSource": "开源经历",
    }
)

# Legacy project "role" values carry this label before the time range
LEGACY_ROLE_PREFIX = "后端开发 • "

# Address links synthesized from a legacy "city" field point here
MAPS_QUERY_URL = "https://maps.google.com/?q={query}"
