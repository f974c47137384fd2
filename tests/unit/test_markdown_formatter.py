"""Unit tests for markdown export."""

from datetime import date

import pytest

from folio.contexts.intake import normalize_config
from folio.contexts.templating import format_resume_markdown

TODAY = date(2024, 6, 15)


@pytest.fixture
def document():
    return normalize_config(
        {
            "site": {"order": ["work", "skills", "education"], "moduleTitles": {"skill": "技能"}},
            "basic": {
                "name": "Ada",
                "gender": "女",
                "position": "后端工程师",
                "workPeriod": {"start": "2019.01", "end": "2021.06"},
                "contacts": {"phone": "13800138000", "wechat": "ada_w", "email": "ada@example.com"},
                "addressLinks": [{"label": "GitHub", "url": "https://github.com/ada"}],
                "educationSummary": {"raw": "MIT 2015"},
            },
            "work": [{"company": "Acme", "time": "2020 - 2021", "position": "Dev", "achievements": ["Shipped"]}],
            "skills": {"listStyle": "ordered", "items": ["Python", "Go"]},
            "education": [
                {
                    "school": "MIT",
                    "start": "2011",
                    "end": "2015",
                    "degree": "BSc",
                    "major": "CS",
                    "courses": [{"name": "Algorithms", "credit": 4}],
                }
            ],
            "projects": [{"name": "Folio", "time": "2022", "description": "Resume tool", "techStack": "Python, Jinja2"}],
            "honors": ["Gold medal", {"name": "Best paper", "time": "2019"}],
            "openSource": [{"name": "tiny", "url": "https://x.dev/tiny", "stars": "1.2k"}],
        }
    )


@pytest.mark.unit
def test_header_and_basic_info(document):
    lines = format_resume_markdown(document, today=TODAY).splitlines()

    assert lines[:5] == ["# Ada", "", "> 后端工程师", "", "## 基本信息"]
    assert "- 性别：女" in lines
    assert "- 工作年限：2019.01 - 2021.06（2年5个月）" in lines
    assert "- 电话：13800138000 ([拨打](tel:13800138000))" in lines
    assert "- 微信：ada_w" in lines
    assert "- 邮箱：ada@example.com ([发送邮件](mailto:ada@example.com))" in lines
    assert "- 地址/链接：[GitHub](https://github.com/ada)" in lines


@pytest.mark.unit
def test_education_summary_hidden_when_structured_education_shown(document):
    assert "MIT 2015" not in format_resume_markdown(document, today=TODAY)


@pytest.mark.unit
def test_education_summary_shown_without_structured_education():
    doc = normalize_config({"basic": {"name": "Ada", "educationSummary": {"raw": "MIT 2015"}}})

    assert "- 教育：MIT 2015" in format_resume_markdown(doc, today=TODAY).splitlines()


@pytest.mark.unit
def test_sections_follow_site_order(document):
    text = format_resume_markdown(document, today=TODAY)
    headings = [line for line in text.splitlines() if line.startswith("## ")]

    assert headings == [
        "## 基本信息",
        "## 工作经历",
        "## 技能",
        "## 教育经历",
        "## 项目经历",
        "## 荣誉",
        "## 开源经历",
    ]


@pytest.mark.unit
def test_section_formatting(document):
    lines = format_resume_markdown(document, today=TODAY).splitlines()

    assert "- **Acme** (2020 - 2021)" in lines
    assert "  - 岗位：Dev" in lines
    assert "  - Shipped" in lines
    assert "1. Python" in lines
    assert "2. Go" in lines
    assert "- **MIT** (2011 - 2015)" in lines
    assert "  - 学历：BSc，专业：CS" in lines
    assert "  - 课程：Algorithms（4 学分）" in lines
    assert "- **Folio** (2022)" in lines
    assert "  - 项目描述：Resume tool" in lines
    assert "  - 技术栈：Python / Jinja2" in lines
    assert "- Gold medal" in lines
    assert "- Best paper (2019)" in lines
    assert "- [tiny](https://x.dev/tiny) (⭐ 1.2k)" in lines


@pytest.mark.unit
def test_hidden_index_renders_bullets():
    doc = normalize_config({"skills": {"ordered": True, "hideIndex": True, "items": ["Python"]}})

    assert "- Python" in format_resume_markdown(doc, today=TODAY).splitlines()


@pytest.mark.unit
def test_disabled_sections_are_skipped():
    doc = normalize_config({"honors": {"enabled": False, "items": ["Gold medal"]}})

    assert "荣誉" not in format_resume_markdown(doc, today=TODAY)


@pytest.mark.unit
def test_output_is_deterministic_for_fixed_date(document):
    assert format_resume_markdown(document, today=TODAY) == format_resume_markdown(document, today=TODAY)
