"""
Integration tests for HTML rendering.
Tests: embedded config → normalized document → rendered HTML page.
"""

import pytest

from folio.contexts.intake import load_config, normalize_config
from folio.contexts.templating import render_resume_html


@pytest.fixture
def document():
    return normalize_config(load_config())


@pytest.mark.integration
def test_renders_embedded_resume(document):
    html = render_resume_html(document)

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>个人简历</title>" in html
    assert "--theme-color: #1f4e79;" in html
    assert "<h1>张三</h1>" in html
    assert 'href="mailto:zhangsan@example.com"' in html
    assert 'id="resumePaper"' in html


@pytest.mark.integration
def test_sections_follow_site_order(document):
    html = render_resume_html(document)
    positions = [html.index(f'data-module="{module}"') for module in document.site.order]

    assert positions == sorted(positions)


@pytest.mark.integration
def test_every_entry_is_a_content_block(document):
    html = render_resume_html(document)
    entries = sum(len(document.section(module).items) for module in ("work", "projects", "education", "openSource"))

    assert html.count('class="entry"') == entries
    assert html.count('class="resume-section"') == 7


@pytest.mark.integration
def test_markdown_in_free_text(document):
    html = render_resume_html(document)

    assert "<strong>Go</strong>" in html
    assert '<ol class="skill-list">' in html
    for tech in ("Go", "MySQL", "Kafka", "Kubernetes"):
        assert f"<span>{tech}</span>" in html


@pytest.mark.integration
def test_export_variant(document):
    html = render_resume_html(document, export=True)

    assert 'id="exportPaper"' in html
    assert "export-paper" in html


@pytest.mark.integration
def test_fallback_education_section():
    doc = normalize_config({"conf": {}, "basic": {"cnName": "N", "college": "某大学 · 2015"}})
    html = render_resume_html(doc)

    assert "<h2>教育经历</h2>" in html
    assert "某大学 · 2015" in html


@pytest.mark.integration
def test_user_text_is_escaped():
    doc = normalize_config({"basic": {"name": "<script>alert(1)</script>"}})
    html = render_resume_html(doc)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.integration
def test_hidden_index_skills():
    doc = normalize_config({"skills": {"ordered": True, "hideIndex": True, "items": ["x"]}})

    assert '<ol class="skill-list no-index">' in render_resume_html(doc)
