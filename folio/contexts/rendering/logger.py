"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List, Tuple

from loguru import logger

from folio.contexts.rendering.pagination import PAGE_MARGIN_MM
from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and the exported page geometry.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Page": f"A4, {PAGE_MARGIN_MM}mm margins"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(resume_name: str, output_path: Path, host_dir: Path) -> None:
    """Log start of a PDF export with context."""
    _log_info(f"Starting PDF export: {resume_name}")
    _log_debug(f"  Export host: {host_dir}")
    _log_debug(f"  Target: {output_path}")


def log_page_plan(
    bitmap_size: Tuple[int, int], page_height: int, segments: List[Tuple[int, int]]
) -> None:
    """Log the planned page segments."""
    width, height = bitmap_size
    _log_info(f"Bitmap {width}x{height}px, page height {page_height}px -> {len(segments)} page(s)")
    for index, (start, end) in enumerate(segments, 1):
        _log_debug(f"  Page {index}: [{start}, {end}) ({end - start}px)")


def log_export_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log a completed export.

    Args:
        resume_name: Resume identifier
        result: ExportResult from export_resume_pdf()
        elapsed_time: Time taken
    """
    _log_success(f"{resume_name}: exported {result.page_count} page(s) ({elapsed_time:.2f}s)")
    _log_info(f"  PDF: {result.pdf_path}")


def log_export_failure(resume_name: str, error: Exception, elapsed_time: float) -> None:
    _log_error(f"Failed to export {resume_name} ({elapsed_time:.2f}s)")
    _log_error(f"  Error: {error}")
