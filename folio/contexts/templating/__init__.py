"""
Templating Context

Responsibilities:
- Defines the canonical ResumeDocument data model
- Serializes documents to markdown for copy-paste reuse
- Renders documents to HTML through Jinja2 templates

Owns: Resume document structure, markdown export, HTML templates
Never: Reads configuration files or decides page breaks
"""

from folio.contexts.templating.html_renderer import (
    BLOCK_SELECTORS,
    TemplateRegistry,
    render_resume_html,
)
from folio.contexts.templating.markdown_formatter import format_resume_markdown
from folio.contexts.templating.resume_data_structure import ResumeDocument

__all__ = [
    # Data structure
    "ResumeDocument",
    # Output formats
    "format_resume_markdown",
    "render_resume_html",
    "TemplateRegistry",
    "BLOCK_SELECTORS",
]
