"""Unit tests for TemplateRegistry and the markdown filters."""

import pytest
from jinja2 import TemplateNotFound

from folio.contexts.templating import TemplateRegistry
from folio.contexts.templating.html_renderer import markdown_block, markdown_inline


@pytest.mark.unit
def test_markdown_filters():
    assert markdown_inline("**bold** text") == "<strong>bold</strong> text"
    assert markdown_inline("") == ""
    assert "<br />" in markdown_block("line one\nline two")


@pytest.mark.unit
def test_template_registry_caching():
    registry = TemplateRegistry()
    template = registry.get_template()

    assert registry.is_cached("resume.html.jinja")
    assert registry.get_template() is template

    registry.clear_cache()
    assert not registry.is_cached("resume.html.jinja")


@pytest.mark.unit
def test_template_registry_missing_template():
    with pytest.raises(TemplateNotFound):
        TemplateRegistry().get_template("nonexistent.html.jinja")
