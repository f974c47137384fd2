"""Unit tests for schema detection and the legacy configuration schema."""

import pytest

from folio.contexts.intake.normalizer import (
    is_legacy_config,
    normalize_config,
    parse_legacy_config,
    parse_modern_config,
    select_parser,
)
from folio.contexts.templating.resume_data_structure import WorkPeriod


@pytest.fixture
def legacy_config():
    return {
        "conf": {
            "title": "旧版简历",
            "mainThemeColor": "336699",
            "pdf": "old.PDF",
            "modules": {"exp": "项目", "workExperience": "工作", "skill": "技能"},
        },
        "basic": {
            "cnName": "李四",
            "sex": "女",
            "birth": 1995,
            "objective": "前端开发",
            "overall": "2019.01~2021.06",
            "phoneNumber": "13900000000",
            "wechatText": "lisi",
            "email": "lisi@example.com",
            "emailText": "ignored@example.com",
            "college": "浙江大学 · 软件工程",
            "city": "杭州 西湖",
        },
        "skill": ["JavaScript", " ", "Vue"],
        "exp": [
            {
                "name": "活动页平台",
                "role": "后端开发 • 2020.01 - 2020.12",
                "bg": "低代码活动搭建",
                "des": ["负责渲染引擎"],
                "stack": "Vue, Node/ Redis",
            },
            {"role": "no name"},
        ],
        "workExperience": [
            {
                "company": "某公司",
                "startDate": "2019.01",
                "endDate": "2021.06",
                "position": "工程师",
                "responsibilities": ["做需求"],
            }
        ],
        "evaluation": "踏实肯干",
        "honors": ["优秀毕业生"],
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"conf": {}, "basic": {}}, True),
        ({"conf": None, "basic": None, "site": {}}, True),
        ({"conf": {}}, False),
        ({"basic": {}}, False),
        ({"site": {}, "basic": {}}, False),
        ([], False),
        (None, False),
    ],
)
def test_is_legacy_config(raw, expected):
    assert is_legacy_config(raw) is expected


@pytest.mark.unit
def test_select_parser():
    assert select_parser({"conf": {}, "basic": {}}) is parse_legacy_config
    assert select_parser({"basic": {}}) is parse_modern_config


@pytest.mark.unit
def test_minimal_legacy_mapping():
    doc = normalize_config({"conf": {"title": "T"}, "basic": {"cnName": "N", "overall": "2019.01~2021.06"}})

    assert doc.site.title == "T"
    assert doc.basic.name == "N"
    assert doc.basic.work_period == WorkPeriod(start="2019.01", end="2021.06")
    assert doc.education is None
    assert doc.skills is None
    assert doc.projects is None
    assert doc.work is None


@pytest.mark.unit
def test_legacy_site(legacy_config):
    site = normalize_config(legacy_config).site

    assert site.title == "旧版简历"
    assert site.theme_color == "#336699"
    assert site.pdf_file_name == "old.PDF"
    assert site.order[:3] == ("projects", "work", "skills")
    assert site.title_for("projects") == "项目"
    assert site.title_for("work") == "工作"
    assert site.title_for("honors") == "荣誉"


@pytest.mark.unit
def test_legacy_basic(legacy_config):
    basic = normalize_config(legacy_config).basic

    assert basic.name == "李四"
    assert basic.gender == "女"
    assert basic.age == "1995"
    assert basic.position == "前端开发"
    assert basic.contacts.phone == "13900000000"
    assert basic.contacts.wechat == "lisi"
    assert basic.contacts.email == "lisi@example.com"
    assert basic.education_summary.raw == "浙江大学 · 软件工程"


@pytest.mark.unit
def test_legacy_city_becomes_map_link(legacy_config):
    links = normalize_config(legacy_config).basic.address_links

    assert len(links) == 1
    assert links[0].label == "杭州 西湖"
    assert links[0].url == "https://maps.google.com/?q=%E6%9D%AD%E5%B7%9E%20%E8%A5%BF%E6%B9%96"


@pytest.mark.unit
def test_legacy_projects(legacy_config):
    projects = normalize_config(legacy_config).projects

    assert len(projects.items) == 1
    project = projects.items[0]
    assert project.name == "活动页平台"
    assert project.time == "2020.01 - 2020.12"
    assert project.description == "低代码活动搭建"
    assert project.responsibilities == ("负责渲染引擎",)
    assert project.tech_stack == ("Vue", "Node", "Redis")


@pytest.mark.unit
def test_legacy_role_without_prefix_is_kept():
    doc = normalize_config({"conf": {}, "basic": {}, "exp": [{"name": "P", "role": "2020 至今"}]})

    assert doc.projects.items[0].time == "2020 至今"


@pytest.mark.unit
def test_legacy_work_and_profile(legacy_config):
    doc = normalize_config(legacy_config)
    work = doc.work.items[0]

    assert work.company == "某公司"
    assert work.time == "2019.01 - 2021.06"
    assert work.position == "工程师"
    assert work.achievements == ("做需求",)
    assert doc.profile.content == "踏实肯干"


@pytest.mark.unit
def test_legacy_skills_are_unordered(legacy_config):
    skills = normalize_config(legacy_config).skills

    assert skills.items == ("JavaScript", "Vue")
    assert skills.ordered is False


@pytest.mark.unit
def test_legacy_honors_use_shared_rules(legacy_config):
    honors = normalize_config(legacy_config).honors

    assert [item.name for item in honors.items] == ["优秀毕业生"]


@pytest.mark.unit
def test_legacy_college_is_fallback_only(legacy_config):
    assert normalize_config(legacy_config).education_fallback == "浙江大学 · 软件工程"


@pytest.mark.unit
def test_legacy_normalizes_to_stable_modern_document(legacy_config):
    doc = normalize_config(legacy_config)

    assert normalize_config(doc.to_dict()) == doc
