"""Year-month parsing and working-experience duration formatting."""

import re
from datetime import date
from typing import Optional

# Markers meaning "up to today" in an end date; latin markers match whole words only
PRESENT_PATTERN = re.compile(r"至今|现在|\b(?:present|now)\b", re.IGNORECASE)

YEAR_MONTH_PATTERN = re.compile(r"(\d{4})\D?(\d{1,2})?")


def parse_year_month(value: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """
    Parse a loose year-month string into the first day of that month.

    Accepts "2019.01", "2019-1", "2019年3月", "2019". Strings containing a
    present marker ("至今", "present", ...) resolve to today's month.

    Args:
        value: Free-text date
        today: Reference date for present markers (default: date.today())

    Returns:
        First day of the parsed month, or None if no year is found

    Examples:
        >>> parse_year_month("2019.03")
        datetime.date(2019, 3, 1)
        >>> parse_year_month("2021年")
        datetime.date(2021, 1, 1)
    """
    if not value:
        return None

    today = today or date.today()
    if PRESENT_PATTERN.search(value):
        return today.replace(day=1)

    match = YEAR_MONTH_PATTERN.search(value)
    if not match:
        return None

    year = int(match.group(1))
    month = int(match.group(2) or 1)
    month = min(max(month, 1), 12)
    return date(year, month, 1)


def format_duration(months: int) -> str:
    """Format a month count as "N年M个月", or "不足1年" below one month."""
    years, remainder = divmod(max(months, 0), 12)
    parts = []
    if years > 0:
        parts.append(f"{years}年")
    if remainder > 0:
        parts.append(f"{remainder}个月")
    elif years == 0:
        parts.append("不足1年")
    return "".join(parts)


def experience_text(
    start: Optional[str], end: Optional[str], today: Optional[date] = None
) -> str:
    """
    Describe a working period with its elapsed duration.

    When the start cannot be parsed the raw values are joined with " - ".
    A missing or unparsable end counts up to today.

    Args:
        start: Period start (free text)
        end: Period end (free text, may be a present marker)
        today: Reference date (default: date.today())

    Returns:
        Text like "2019.01 - 2021.06（2年5个月）", or "" if nothing is known

    Examples:
        >>> experience_text("2019.01", "2021.06")
        '2019.01 - 2021.06（2年5个月）'
    """
    start_date = parse_year_month(start, today)
    if start_date is None:
        return " - ".join(part for part in (start, end) if part)

    end_date = parse_year_month(end, today) or (today or date.today())
    months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    duration = format_duration(months)

    text = start
    if end:
        text += f" - {end}"
    return f"{text}（{duration}）"
