"""
PDF inspection helpers.

Helper functions:
    page_count: Quick page count without full extraction.
    page_sizes_mm: Page dimensions in millimetres, for checking exported geometry.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from PyPDF2 import PdfReader

POINTS_PER_MM = 72 / 25.4


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def page_sizes_mm(pdf_path: Path) -> List[Tuple[float, float]]:
    """Return (width, height) of every page in millimetres, rounded to 0.1 mm."""
    reader = PdfReader(str(pdf_path))
    sizes = []
    for page in reader.pages:
        box = page.mediabox
        width = float(box.width) / POINTS_PER_MM
        height = float(box.height) / POINTS_PER_MM
        sizes.append((round(width, 1), round(height, 1)))
    return sizes
