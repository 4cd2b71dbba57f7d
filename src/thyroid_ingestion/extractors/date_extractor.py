# ============================================================================
# src/thyroid_ingestion/extractors/date_extractor.py
# ============================================================================
"""
Report Date Extraction

Finds the examination date in an OCR transcript. Patterns are tried in
priority order (labelled dates first, foreign formats last); the first
pattern whose first match is a real calendar date inside the accepted
window wins.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Optional, Tuple

from ..config import ExtractionSettings, extraction_settings

logger = logging.getLogger(__name__)


class DateOrder(str, Enum):
    YEAR_FIRST = "year_first"    # YYYY-MM-DD
    MONTH_FIRST = "month_first"  # MM/DD/YYYY
    DAY_FIRST = "day_first"      # DD.MM.YYYY


@dataclass(frozen=True)
class DatePattern:
    name: str
    regex: "re.Pattern"
    order: DateOrder


DATE_PATTERNS: Tuple[DatePattern, ...] = (
    # Report labels
    DatePattern(
        "exam date label",
        re.compile(r'检查日期[：:\s]*(\d{4})[-/年](\d{1,2})[-/月](\d{1,2})日?'),
        DateOrder.YEAR_FIRST,
    ),
    DatePattern(
        "date label",
        re.compile(r'日期[：:\s]*(\d{4})[年\-/.\s]+(\d{1,2})[月\-/.\s]+(\d{1,2})日?'),
        DateOrder.YEAR_FIRST,
    ),
    # Chinese formats
    DatePattern(
        "full chinese",
        re.compile(r'(\d{4})年(\d{1,2})月(\d{1,2})日'),
        DateOrder.YEAR_FIRST,
    ),
    DatePattern(
        "loose chinese",
        re.compile(r'(\d{4})[年\-/.\s]+(\d{1,2})[月\-/.\s]+(\d{1,2})日?'),
        DateOrder.YEAR_FIRST,
    ),
    # Separator formats
    DatePattern(
        "dotted",
        re.compile(r'(\d{4})\.(\d{1,2})\.(\d{1,2})'),
        DateOrder.YEAR_FIRST,
    ),
    DatePattern(
        "dashed",
        re.compile(r'(\d{4})[-/](\d{1,2})[-/](\d{1,2})'),
        DateOrder.YEAR_FIRST,
    ),
    # Foreign formats
    DatePattern(
        "us",
        re.compile(r'(\d{1,2})/(\d{1,2})/(\d{4})'),
        DateOrder.MONTH_FIRST,
    ),
    DatePattern(
        "european",
        re.compile(r'(\d{1,2})\.(\d{1,2})\.(\d{4})'),
        DateOrder.DAY_FIRST,
    ),
)


def _split_parts(parts: Tuple[int, int, int], order: DateOrder) -> Tuple[int, int, int]:
    first, second, third = parts
    if order == DateOrder.MONTH_FIRST:
        return third, first, second
    if order == DateOrder.DAY_FIRST:
        return third, second, first
    return first, second, third


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def is_reasonable_date(
    candidate: date,
    today: date,
    settings: ExtractionSettings = extraction_settings
) -> bool:
    """Not too far in the past, not in the future (with time zone slack)."""
    latest = today + timedelta(days=settings.REPORT_DATE_FUTURE_TOLERANCE_DAYS)
    if candidate >= latest:
        return False
    return candidate >= _years_before(today, settings.REPORT_DATE_MAX_AGE_YEARS)


def extract_report_date(
    text: str,
    today: Optional[date] = None,
    settings: ExtractionSettings = extraction_settings
) -> Optional[date]:
    """
    Extract the report date from OCR text.

    Args:
        text: OCR transcript
        today: Reference day for the plausibility window (defaults to today)
        settings: Extraction settings (age/future limits)

    Returns:
        The date, or None if no pattern yields a plausible date
    """
    if not text:
        return None
    today = today or date.today()

    for pattern in DATE_PATTERNS:
        match = pattern.regex.search(text)
        if not match:
            continue

        year, month, day = _split_parts(
            tuple(int(group) for group in match.groups()), pattern.order
        )
        try:
            candidate = date(year, month, day)
        except ValueError:
            logger.debug(f"Invalid date {year}-{month}-{day} from {pattern.name} pattern")
            continue

        if not is_reasonable_date(candidate, today, settings):
            logger.debug(f"Date {candidate} outside accepted window ({pattern.name})")
            continue

        logger.debug(f"Report date {candidate} ({pattern.name} pattern)")
        return candidate

    logger.debug("No report date found")
    return None
