"""
FOLIO - Formatted Output of Loosely-typed Input Of resumes

Renders a structured resume from a YAML configuration document and exports it
as markdown, HTML, or a paginated PDF.

Architecture:
- Intake Context: Configuration loading and normalization into a canonical document
- Templating Context: Canonical document model, markdown and HTML output
- Rendering Context: Content-aware pagination and PDF export
"""

__version__ = "0.1.0"
