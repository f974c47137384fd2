"""
Content-aware pagination for rasterized resumes.

The exported resume is a single tall bitmap. Slicing it at fixed page heights
would cut through headings and entries, so page breaks are moved up to the
nearest content-block boundary ("safe cut") when one lies close enough to the
ideal break.

Planner rule, per page:
    target = cursor + page_height
    if target >= total_height: last page, stop
    candidate = largest safe cut in [cursor + floor(page_height * min_segment_ratio), target]
    end = candidate, unless there is none or it is within min_slack_px of the
          cursor, in which case end = target (a mid-block cut)

The lower bound keeps a page from shrinking below min_segment_ratio of its
height just to honor a boundary.

Both thresholds are empirical, tuned against the exported page geometry, and
are configurable through PaginationSettings (env FOLIO_MIN_SEGMENT_RATIO,
FOLIO_MIN_SLACK_PX).
"""

import math
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from dotenv import load_dotenv

load_dotenv()

# A4 page geometry with fixed margins, in millimetres
A4_WIDTH_MM = 210
A4_HEIGHT_MM = 297
PAGE_MARGIN_MM = 8

DEFAULT_MIN_SEGMENT_RATIO = 0.55
DEFAULT_MIN_SLACK_PX = 80

Segment = Tuple[int, int]


@dataclass(frozen=True)
class PaginationSettings:
    """
    Thresholds for the pagination planner.

    Attributes:
        min_segment_ratio: Smallest page height, as a fraction of the full
                           page height, accepted to land on a safe cut
        min_slack_px: Cuts this close to the cursor (or closer) fall back to
                      the naive full-height break
    """

    min_segment_ratio: float = DEFAULT_MIN_SEGMENT_RATIO
    min_slack_px: int = DEFAULT_MIN_SLACK_PX

    def __post_init__(self):
        # A negative slack lets a page end where it started; the planner would never advance
        if not 0 <= self.min_segment_ratio <= 1:
            raise ValueError(
                f"min_segment_ratio must be within [0, 1], got {self.min_segment_ratio}"
            )
        if self.min_slack_px < 0:
            raise ValueError(f"min_slack_px must not be negative, got {self.min_slack_px}")

    @classmethod
    def from_env(cls) -> "PaginationSettings":
        return cls(
            min_segment_ratio=float(
                os.getenv("FOLIO_MIN_SEGMENT_RATIO", DEFAULT_MIN_SEGMENT_RATIO)
            ),
            min_slack_px=int(os.getenv("FOLIO_MIN_SLACK_PX", DEFAULT_MIN_SLACK_PX)),
        )


@dataclass(frozen=True)
class BlockBox:
    """Vertical extent of a content block, in CSS pixels of the rendered page."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def content_size_mm(
    page_width_mm: float = A4_WIDTH_MM,
    page_height_mm: float = A4_HEIGHT_MM,
    margin_mm: float = PAGE_MARGIN_MM,
) -> Tuple[float, float]:
    """Printable (width, height) of a page after margins."""
    return page_width_mm - 2 * margin_mm, page_height_mm - 2 * margin_mm


def page_height_for_width(bitmap_width: int, margin_mm: float = PAGE_MARGIN_MM) -> int:
    """
    Height in bitmap pixels of one printable A4 page.

    The bitmap is scaled so its full width spans the printable width; the page
    height follows from the same pixels-per-millimetre ratio.

    Examples:
        >>> page_height_for_width(1940)
        2810
    """
    content_width_mm, content_height_mm = content_size_mm(margin_mm=margin_mm)
    px_per_mm = bitmap_width / content_width_mm
    return math.floor(content_height_mm * px_per_mm)


def collect_safe_cuts(
    blocks: Iterable[BlockBox], scale: float, total_height: int
) -> List[int]:
    """
    Build the sorted set of safe cut offsets in bitmap pixels.

    Always contains 0 and total_height. Each block contributes its scaled top
    and bottom edges (floored) when they fall strictly inside the bitmap.

    Args:
        blocks: Section and entry boxes in CSS pixels
        scale: Bitmap pixels per CSS pixel
        total_height: Bitmap height in pixels
    """
    cuts = {0, total_height}
    for block in blocks:
        for edge in (math.floor(block.top * scale), math.floor(block.bottom * scale)):
            if 0 < edge < total_height:
                cuts.add(edge)
    return sorted(cuts)


def find_last_safe_cut(cuts: Sequence[int], lower: int, upper: int) -> Optional[int]:
    """Largest cut in [lower, upper], or None. `cuts` must be sorted ascending."""
    found = None
    for cut in cuts:
        if cut < lower:
            continue
        if cut > upper:
            break
        found = cut
    return found


def plan_page_segments(
    total_height: int,
    page_height: int,
    safe_cuts: Iterable[int],
    settings: Optional[PaginationSettings] = None,
) -> List[Segment]:
    """
    Split [0, total_height) into page segments that prefer content boundaries.

    Args:
        total_height: Bitmap height in pixels
        page_height: Printable page height in pixels
        safe_cuts: Candidate break offsets (any order, duplicates allowed)
        settings: Planner thresholds (default: PaginationSettings())

    Returns:
        Ordered [start, end) segments covering [0, total_height) with no gaps
        or overlaps; empty when total_height <= 0

    Raises:
        ValueError: If page_height is not positive

    Examples:
        >>> plan_page_segments(1500, 800, [0, 400, 820, 1500])
        [(0, 800), (800, 1500)]
        >>> plan_page_segments(1500, 800, [0, 700, 1500])
        [(0, 700), (700, 1500)]
    """
    if page_height <= 0:
        raise ValueError(f"page_height must be positive, got {page_height}")
    if settings is None:
        settings = PaginationSettings()

    cuts = sorted(set(safe_cuts))
    min_segment = math.floor(page_height * settings.min_segment_ratio)

    segments: List[Segment] = []
    cursor = 0
    while cursor < total_height:
        target = cursor + page_height
        if target >= total_height:
            segments.append((cursor, total_height))
            break

        candidate = find_last_safe_cut(cuts, cursor + min_segment, target)
        end = candidate if candidate is not None else target
        if end <= cursor + settings.min_slack_px:
            end = target

        segments.append((cursor, end))
        cursor = end

    return segments


def plan_bitmap_pages(
    bitmap_width: int,
    bitmap_height: int,
    blocks: Iterable[BlockBox],
    scale: float,
    settings: Optional[PaginationSettings] = None,
) -> List[Segment]:
    """Plan A4 page segments for a rendered bitmap and its content blocks."""
    page_height = page_height_for_width(bitmap_width)
    cuts = collect_safe_cuts(blocks, scale, bitmap_height)
    return plan_page_segments(bitmap_height, page_height, cuts, settings)
