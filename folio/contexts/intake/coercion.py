"""
Scalar coercion for untyped configuration trees.

The YAML document is author-controlled, so every field may be missing or of
the wrong type. These helpers are the only place that boundary is crossed:
each one is total, never raises, and degrades to a well-defined default.
Everything downstream works on the coerced shape.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

# Runs of whitespace, comma, slash or pipe separate tech-stack tokens
TECH_STACK_DELIMITERS = re.compile(r"[\s,/|]+")


def as_record(value: Any) -> Optional[Dict[str, Any]]:
    """Return value if it is a mapping (not a list), else None."""
    if isinstance(value, Mapping):
        return dict(value)
    return None


def as_list(value: Any) -> List[Any]:
    """Return value as a list if it is a sequence (list/tuple), else []."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def to_string(value: Any) -> Optional[str]:
    """
    Coerce a scalar to a trimmed string.

    Strings are trimmed; blank strings count as absent. Integers and floats are
    stringified (integral floats without a trailing ".0"). Booleans, None and
    containers are absent.

    Examples:
        >>> to_string("  Ada ")
        'Ada'
        >>> to_string(2019.01)
        '2019.01'
        >>> to_string(28.0)
        '28'
        >>> to_string(True) is None
        True
    """
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    return None


def to_string_list(value: Any) -> List[str]:
    """
    Coerce a value to a list of non-blank strings.

    Lists coerce element-wise, dropping elements that are not scalars or are
    blank. A lone scalar becomes a one-element list. Anything else is [].
    """
    if isinstance(value, (list, tuple)):
        return [text for text in (to_string(item) for item in value) if text]

    text = to_string(value)
    return [text] if text else []


def to_bool(value: Any, default: bool) -> bool:
    """Return value only if it is literally a boolean, else default."""
    if isinstance(value, bool):
        return value
    return default


def split_tech_stack(value: Any) -> List[str]:
    """
    Coerce a technology stack to a list of tokens.

    A list is coerced element-wise like to_string_list(). A string is split on
    any run of whitespace, commas, slashes or pipes.

    Examples:
        >>> split_tech_stack("Go, Rust/ C++")
        ['Go', 'Rust', 'C++']
        >>> split_tech_stack(["Python", " ", 3])
        ['Python', '3']
    """
    if isinstance(value, (list, tuple)):
        return to_string_list(value)

    text = to_string(value)
    if not text:
        return []
    return [token.strip() for token in TECH_STACK_DELIMITERS.split(text) if token.strip()]
