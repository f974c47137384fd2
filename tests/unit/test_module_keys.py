"""Unit tests for module key aliases and order resolution."""

import pytest

from folio.contexts.intake.defaults import DEFAULT_ORDER
from folio.contexts.intake.module_keys import (
    MODULE_ALIAS,
    canonical_module_key,
    resolve_module_order,
    resolve_module_titles,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "key, expected",
    [
        ("education", "education"),
        ("EDU", "education"),
        ("skill", "skills"),
        ("exp", "projects"),
        ("evaluation", "profile"),
        ("Work-Experience", "work"),
        ("work_experience", "work"),
        ("honer", "honors"),
        ("open source", "openSource"),
        ("openSource", "openSource"),
        ("hobbies", None),
        ("", None),
        (None, None),
    ],
)
def test_canonical_module_key(key, expected):
    assert canonical_module_key(key) == expected


@pytest.mark.unit
def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        MODULE_ALIAS["cv"] = "profile"


@pytest.mark.unit
def test_empty_order_falls_back_to_default():
    assert resolve_module_order([]) == DEFAULT_ORDER


@pytest.mark.unit
def test_order_dedupes_and_appends_missing():
    order = resolve_module_order(["work", "exp", "WORK", "unknown"])

    assert order[:2] == ("work", "projects")
    assert order[2:] == ("education", "skills", "profile", "honors", "openSource")


@pytest.mark.unit
@pytest.mark.parametrize(
    "keys",
    [
        [],
        ["honors"],
        ["nope", "also-nope"],
        ["openSource", "open_source", "edu", "skill", "exp", "evaluation", "workExperience", "honer"],
    ],
)
def test_order_is_total(keys):
    order = resolve_module_order(keys)

    assert len(order) == 7
    assert set(order) == set(DEFAULT_ORDER)


@pytest.mark.unit
def test_resolve_module_titles_by_alias():
    titles = resolve_module_titles({"exp": "项目", "Work_Experience": "工作", "hobbies": "爱好", "skills": None})

    assert titles == {"projects": "项目", "work": "工作"}


@pytest.mark.unit
def test_resolve_module_titles_empty():
    assert resolve_module_titles(None) == {}
    assert resolve_module_titles({}) == {}
