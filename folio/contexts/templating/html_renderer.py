"""
HTML rendering of a ResumeDocument.

Templates live in folio/contexts/templating/templates/ and are rendered with
Jinja2. Free-text fields (names, list entries, descriptions) may contain
markdown, converted with the `markdown` library through two filters:

- md_inline: single-line markdown without the wrapping <p>
- md_block: paragraphs, with single newlines kept as <br />

Every section container carries the class "resume-section" and every entry the
class "entry". Those are the content blocks whose boundaries the rendering
context turns into safe page-cut offsets (see BLOCK_SELECTORS).
"""

import re
from pathlib import Path
from typing import Dict, Optional

import markdown
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape
from markupsafe import Markup

from folio.contexts.templating.labels import LABEL_SEP, LABELS
from folio.contexts.templating.resume_data_structure import ResumeDocument

TEMPLATES_PATH = Path(__file__).parent / "templates"
RESUME_TEMPLATE = "resume.html.jinja"

# CSS selectors of the blocks a page break may fall between
BLOCK_SELECTORS = (".resume-section", ".entry")

SINGLE_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.DOTALL)


def markdown_inline(text: Optional[str]) -> Markup:
    """Render markdown for inline use, dropping the single <p> wrapper."""
    if not text:
        return Markup("")
    html = markdown.markdown(text).strip()
    match = SINGLE_PARAGRAPH.match(html)
    if match and "<p>" not in match.group(1):
        html = match.group(1)
    return Markup(html)


def markdown_block(text: Optional[str]) -> Markup:
    """Render block markdown, keeping single newlines as line breaks."""
    if not text:
        return Markup("")
    return Markup(markdown.markdown(text, extensions=["nl2br"]))


class TemplateRegistry:
    """
    Registry for loading and caching the resume's Jinja2 templates.

    Templates use the default Jinja2 delimiters with HTML autoescaping; markdown
    output passes through the md_inline/md_block filters as Markup.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.html.jinja templates
                            (default: the package's templates/ directory)
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["md_inline"] = markdown_inline
        self.env.filters["md_block"] = markdown_block

    def get_template(self, name: str = RESUME_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        if name not in self._cache:
            self._cache[name] = self.env.get_template(name)
        return self._cache[name]

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


_default_registry: Optional[TemplateRegistry] = None


def _registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def render_resume_html(
    document: ResumeDocument,
    export: bool = False,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a ResumeDocument as a standalone HTML page.

    Args:
        document: Canonical resume
        export: Render the export variant (light theme, no screen-only chrome)
        registry: Template registry to use (default: shared package registry)

    Returns:
        Complete HTML document
    """
    template = (registry or _registry()).get_template(RESUME_TEMPLATE)

    sections = []
    for module in document.site.order:
        section = document.visible_section(module)
        if section is not None:
            sections.append(
                {"module": module, "title": document.site.title_for(module), "data": section}
            )

    return template.render(
        doc=document,
        sections=sections,
        education_fallback=document.education_fallback,
        education_title=document.site.title_for("education"),
        labels=LABELS,
        sep=LABEL_SEP,
        export=export,
    )
