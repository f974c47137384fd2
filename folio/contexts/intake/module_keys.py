"""
Module key nomenclature and order resolution for the Intake context.

Configuration authors spell module keys many ways ("open_source", "Work-Experience",
"exp", "honer"). Keys are canonicalized by dropping underscores, hyphens and
whitespace and lowercasing, then looked up in a fixed alias table. Unknown keys
are discarded.

Examples:
    >>> canonical_module_key("Open_Source")
    'openSource'
    >>> resolve_module_order(["work", "exp", "WORK", "unknown"])
    ('work', 'projects', 'education', 'skills', 'profile', 'honors', 'openSource')
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from folio.contexts.intake.coercion import to_string
from folio.contexts.intake.defaults import DEFAULT_ORDER

KEY_NOISE = re.compile(r"[_\s-]")

# Canonicalized spelling -> module identifier
MODULE_ALIAS: Mapping[str, str] = MappingProxyType(
    {
        "education": "education",
        "edu": "education",
        "skill": "skills",
        "skills": "skills",
        "project": "projects",
        "projects": "projects",
        "exp": "projects",
        "profile": "profile",
        "evaluation": "profile",
        "work": "work",
        "workexperience": "work",
        "honer": "honors",
        "honor": "honors",
        "honors": "honors",
        "opensource": "openSource",
    }
)


def canonical_module_key(value: Any) -> Optional[str]:
    """Map any key spelling to its module identifier, or None if unknown."""
    text = to_string(value)
    if not text:
        return None
    return MODULE_ALIAS.get(KEY_NOISE.sub("", text).lower())


def resolve_module_order(keys: Iterable[Any]) -> Tuple[str, ...]:
    """
    Resolve a caller-supplied key sequence into a complete module order.

    Takes the caller's keys (or DEFAULT_ORDER when none are given), resolves each
    through the alias table keeping the first occurrence, then appends any
    module still missing in DEFAULT_ORDER's relative order. The result always
    contains every module exactly once.
    """
    source = list(keys) or list(DEFAULT_ORDER)

    order = []
    for raw_key in source:
        module = canonical_module_key(raw_key)
        if module and module not in order:
            order.append(module)

    for module in DEFAULT_ORDER:
        if module not in order:
            order.append(module)

    return tuple(order)


def resolve_module_titles(titles: Optional[Mapping[Any, Any]]) -> Dict[str, str]:
    """
    Resolve a {key spelling: title} mapping to {module: title}.

    Entries with unknown keys or non-string titles are dropped. When two
    spellings resolve to the same module, the later one wins.
    """
    if not titles:
        return {}

    resolved = {}
    for key, title in titles.items():
        module = canonical_module_key(key)
        text = to_string(title)
        if module and text:
            resolved[module] = text
    return resolved
