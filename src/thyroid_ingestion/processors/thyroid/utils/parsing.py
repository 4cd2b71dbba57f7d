# src/thyroid_ingestion/processors/thyroid/utils/parsing.py
"""
Parsing utilities for thyroid panel value extraction.
"""

import re
from typing import Iterable, List, Optional, Tuple

from ....core.context.enums import Qualifier
from ....core.context.extracted_value import NumericToken

# Optional qualifier, digits, optional decimal point and more digits.
# Leftmost match wins: "5.27 2.77-6.31" -> 5.27
_VALUE_PATTERN = re.compile(r'([<>]?)(\d+\.?\d*)')

_REFERENCE_RANGE_PATTERN = re.compile(r'^\s*\d+(\.\d+)?\s*-\s*\d+(\.\d+)?\s*$')

_QUALIFIERS = {
    '': Qualifier.NONE,
    '<': Qualifier.LESS_THAN,
    '>': Qualifier.GREATER_THAN,
}


def normalize_lines(text: str) -> List[str]:
    """
    Split an OCR transcript into trimmed, non-empty lines.

    Order is preserved and nothing is deduplicated.
    """
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_value_token(line: str) -> Optional[NumericToken]:
    """
    Extract the first numeric token from a line.

    Handles values like:
    - "5.27"
    - "<1.3"       (below detection threshold, stored as 1.3)
    - ">81.20"     (above measurable range, stored as 81.2)
    - "0.269+"     (trailing positivity mark is ignored)

    Returns:
        NumericToken for the leftmost match, or None
    """
    if not line:
        return None

    match = _VALUE_PATTERN.search(line)
    if not match:
        return None

    prefix, number = match.groups()
    try:
        magnitude = float(number)
    except ValueError:
        return None

    return NumericToken(
        magnitude=magnitude,
        qualifier=_QUALIFIERS[prefix],
        raw=match.group(0),
    )


def parse_numeric_value(line: str) -> Optional[float]:
    """Magnitude of the first numeric token in a line, qualifier dropped."""
    token = parse_value_token(line)
    return token.magnitude if token else None


def strip_aliases(line: str, aliases: Iterable[str]) -> str:
    """
    Remove indicator labels from a line before reading its value.

    Labels such as "FT3" or "游离T4" carry digits that must never be taken
    for a result. Aliases are expected longest first so that "A-TPO" is
    removed whole rather than leaving "A-".
    """
    for alias in aliases:
        if alias in line:
            line = line.replace(alias, ' ')
    return line.strip()


def is_reference_range(line: str) -> bool:
    """True for a line that is only a range such as '10.44-24.38'."""
    return bool(line) and bool(_REFERENCE_RANGE_PATTERN.match(line))


def parse_reference_range(ref_str: str) -> Optional[Tuple[float, float]]:
    """
    Parse reference range string into (low, high) tuple.

    Handles:
    - "0.27-4.2" or "0.27 - 4.2" (standard range)
    - "<34" or "<=34" (upper limit only, low is 0)
    - ">10" or ">=10" (lower limit only, high is inf)

    Returns:
        Tuple of (low, high) floats, or None if parsing fails
    """
    if not ref_str:
        return None

    ref_str = ref_str.strip()

    range_match = re.search(r'(\d+\.?\d*)\s*[-–—~]\s*(\d+\.?\d*)', ref_str)
    if range_match:
        return (float(range_match.group(1)), float(range_match.group(2)))

    gt_match = re.match(r'^[>≥]\s*=?\s*(\d+\.?\d*)', ref_str)
    if gt_match:
        return (float(gt_match.group(1)), float('inf'))

    lt_match = re.match(r'^[<≤]\s*=?\s*(\d+\.?\d*)', ref_str)
    if lt_match:
        return (0.0, float(lt_match.group(1)))

    return None


def read_candidate(
    line: str,
    aliases: Iterable[str],
    skip_reference_ranges: bool = False
) -> Optional[NumericToken]:
    """
    Value a matcher may take from a line: labels removed, first token parsed.

    With skip_reference_ranges, a line reduced to a bare "low-high" range
    yields nothing.
    """
    cleaned = strip_aliases(line, aliases)
    if skip_reference_ranges and is_reference_range(cleaned):
        return None
    return parse_value_token(cleaned)
