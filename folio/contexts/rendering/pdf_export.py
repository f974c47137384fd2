"""
PDF Export Module

Turns a ResumeDocument into a paginated A4 PDF of image pages.

Pipeline (synchronous, no retries):
    1. Render the export variant of the HTML into a temporary export host directory
    2. Rasterize it with the caller's rasterizer (external: HTML -> bitmap + block boxes)
    3. Collect safe cuts from the block boxes and plan page segments
    4. Slice the bitmap and place each slice on an A4 page with 8 mm margins

Any failure aborts the whole export with ExportError. The export host is
removed on every exit path.
"""

import io
import json
import re
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from folio.contexts.rendering.logger import (
    _log_debug,
    log_export_failure,
    log_export_result,
    log_export_start,
    log_page_plan,
)
from folio.contexts.rendering.pagination import (
    PAGE_MARGIN_MM,
    BlockBox,
    PaginationSettings,
    content_size_mm,
    page_height_for_width,
    plan_bitmap_pages,
)
from folio.contexts.templating.html_renderer import render_resume_html
from folio.contexts.templating.resume_data_structure import ResumeDocument

JPEG_QUALITY = 96
HOST_HTML_NAME = "resume.html"


class ExportError(Exception):
    """
    Exception raised when the PDF export pipeline fails.

    Attributes:
        message: Error description
        stage: Pipeline stage that failed ("render", "rasterize", "plan", "write")
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.stage = stage
        self.original_error = original_error

        parts = [message]
        if stage:
            parts.append(f"Stage: {stage}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


@dataclass
class RasterizedDocument:
    """
    Output of the external rasterizer.

    Attributes:
        image: Full-height bitmap of the export root
        css_height: Height of the export root in CSS pixels (bitmap scale reference)
        blocks: Boxes of every ".resume-section" and ".entry" element, in CSS pixels
    """

    image: Image.Image
    css_height: float
    blocks: List[BlockBox] = field(default_factory=list)

    @property
    def scale(self) -> float:
        """Bitmap pixels per CSS pixel."""
        return self.image.height / self.css_height


# Rasterizer: HTML file inside the export host -> RasterizedDocument
Rasterizer = Callable[[Path], RasterizedDocument]


@dataclass
class ExportResult:
    """
    Result of a PDF export.

    Attributes:
        pdf_path: Path to the written PDF
        page_count: Number of pages written
        segments: Bitmap [start, end) ranges, one per page
    """

    pdf_path: Path
    page_count: int
    segments: List[Tuple[int, int]] = field(default_factory=list)


def ensure_pdf_file_name(value: str) -> str:
    """
    Append ".pdf" unless the name already ends with it (case-insensitive).

    Examples:
        >>> ensure_pdf_file_name("resume")
        'resume.pdf'
        >>> ensure_pdf_file_name("CV.PDF")
        'CV.PDF'
    """
    if re.search(r"\.pdf$", value, re.IGNORECASE):
        return value
    return f"{value}.pdf"


class PrerenderedRasterizer:
    """
    Rasterizer backed by a bitmap and block manifest produced ahead of time.

    The manifest is JSON of the form:
        {"cssHeight": 1754.0, "blocks": [{"top": 0, "height": 120.5}, ...]}

    The HTML handed in by the exporter is ignored; the files must come from
    rendering the same document.
    """

    def __init__(self, image_path: Path, manifest_path: Path):
        self.image_path = Path(image_path)
        self.manifest_path = Path(manifest_path)

    def __call__(self, html_path: Path) -> RasterizedDocument:
        manifest = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        blocks = [
            BlockBox(top=float(block["top"]), height=float(block["height"]))
            for block in manifest.get("blocks", [])
        ]
        with Image.open(self.image_path) as image:
            image.load()
            bitmap = image.copy()

        css_height = float(manifest.get("cssHeight") or bitmap.height)
        return RasterizedDocument(image=bitmap, css_height=css_height, blocks=blocks)


def _slice_to_jpeg(image: Image.Image, start: int, end: int) -> ImageReader:
    page = image.crop((0, start, image.width, end)).convert("RGB")
    buffer = io.BytesIO()
    page.save(buffer, format="JPEG", quality=JPEG_QUALITY)
    buffer.seek(0)
    return ImageReader(buffer)


def write_pdf_pages(
    image: Image.Image,
    segments: Sequence[Tuple[int, int]],
    output_path: Path,
    margin_mm: float = PAGE_MARGIN_MM,
) -> int:
    """
    Write bitmap segments as A4 image pages.

    The bitmap width spans the printable width; each slice keeps that scale,
    so a full page fills the printable height and shorter ones sit at the top.

    Args:
        image: Full-height bitmap
        segments: [start, end) pixel ranges, one per page
        output_path: PDF path to write
        margin_mm: Page margin on every side

    Returns:
        Number of pages written (empty segments are skipped)
    """
    content_width_mm, _ = content_size_mm(margin_mm=margin_mm)
    px_per_mm = image.width / content_width_mm
    _, page_height_pt = A4

    pdf = canvas.Canvas(str(output_path), pagesize=A4, pageCompression=1)
    pages = 0
    for start, end in segments:
        slice_height = end - start
        if slice_height <= 0:
            continue

        height_mm = slice_height / px_per_mm
        pdf.drawImage(
            _slice_to_jpeg(image, start, end),
            margin_mm * mm,
            page_height_pt - (margin_mm + height_mm) * mm,
            width=content_width_mm * mm,
            height=height_mm * mm,
        )
        pdf.showPage()
        pages += 1

    pdf.save()
    return pages


def export_resume_pdf(
    document: ResumeDocument,
    rasterizer: Rasterizer,
    output_dir: Path,
    settings: Optional[PaginationSettings] = None,
) -> ExportResult:
    """
    Export a resume to a paginated PDF.

    Args:
        document: Canonical resume
        rasterizer: Callable turning the export HTML file into a RasterizedDocument
        output_dir: Directory for the PDF (created if missing)
        settings: Pagination thresholds (default: from environment)

    Returns:
        ExportResult with the PDF path and page segments

    Raises:
        ExportError: If any pipeline stage fails
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / ensure_pdf_file_name(document.site.pdf_file_name)
    resume_name = document.basic.name
    start_time = time.time()

    try:
        with tempfile.TemporaryDirectory(prefix="folio-export-") as host:
            host_dir = Path(host)
            log_export_start(resume_name, output_path, host_dir)

            html_path = host_dir / HOST_HTML_NAME
            try:
                html_path.write_text(render_resume_html(document, export=True), encoding="utf-8")
            except Exception as e:
                raise ExportError("Rendering export HTML failed", stage="render", original_error=e) from e

            try:
                raster = rasterizer(html_path)
            except Exception as e:
                raise ExportError("Rasterization failed", stage="rasterize", original_error=e) from e

            if raster.image.width <= 0 or raster.image.height <= 0 or raster.css_height <= 0:
                raise ExportError("Export root rendered empty", stage="rasterize")

            try:
                segments = plan_bitmap_pages(
                    raster.image.width,
                    raster.image.height,
                    raster.blocks,
                    raster.scale,
                    settings or PaginationSettings.from_env(),
                )
            except (ValueError, TypeError, OverflowError) as e:
                raise ExportError("Page planning failed", stage="plan", original_error=e) from e
            log_page_plan(
                raster.image.size, page_height_for_width(raster.image.width), segments
            )

            try:
                pages = write_pdf_pages(raster.image, segments, output_path)
            except Exception as e:
                raise ExportError("Writing PDF failed", stage="write", original_error=e) from e
    except ExportError as e:
        log_export_failure(resume_name, e, time.time() - start_time)
        raise

    _log_debug(f"Export host removed: {host_dir}")
    result = ExportResult(pdf_path=output_path, page_count=pages, segments=segments)
    log_export_result(resume_name, result, time.time() - start_time)
    return result
