"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup
- Year-month parsing and experience durations
- PDF inspection
"""

from folio.utils.pdf_processing import page_count
from folio.utils.timestamp import experience_text, parse_year_month

__all__ = ["experience_text", "page_count", "parse_year_month"]
