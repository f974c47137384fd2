"""
Rendering Context

Responsibilities:
- Plans page breaks for rasterized resumes (content-aware pagination)
- Assembles A4 PDFs from bitmap page slices
- Manages the temporary export host and export diagnostics

Owns: Page geometry, pagination, PDF output
Never: Modifies resume content
"""

from folio.contexts.rendering.pagination import (
    BlockBox,
    PaginationSettings,
    collect_safe_cuts,
    page_height_for_width,
    plan_page_segments,
)
from folio.contexts.rendering.pdf_export import (
    ExportError,
    ExportResult,
    PrerenderedRasterizer,
    RasterizedDocument,
    ensure_pdf_file_name,
    export_resume_pdf,
)

__all__ = [
    # Pagination
    "BlockBox",
    "PaginationSettings",
    "collect_safe_cuts",
    "page_height_for_width",
    "plan_page_segments",
    # Export
    "ExportError",
    "ExportResult",
    "PrerenderedRasterizer",
    "RasterizedDocument",
    "ensure_pdf_file_name",
    "export_resume_pdf",
]
