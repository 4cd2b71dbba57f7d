# ============================================================================
# FILE: tests/unit/test_parsing.py
# ============================================================================
"""
Unit tests for line normalization and value parsing
"""

import pytest

from thyroid_ingestion.constants import get_catalog
from thyroid_ingestion.core.context import Qualifier
from thyroid_ingestion.processors.thyroid.utils.parsing import (
    normalize_lines,
    parse_value_token,
    parse_numeric_value,
    strip_aliases,
    is_reference_range,
    parse_reference_range,
    read_candidate,
)


# ============================================================================
# LINE NORMALIZER
# ============================================================================

def test_normalize_lines_trims_and_drops_blank():
    """Blank and whitespace-only lines are dropped, the rest trimmed"""
    text = "  FT3 \n\n   \n\t5.27\t\nFT4"
    assert normalize_lines(text) == ["FT3", "5.27", "FT4"]


def test_normalize_lines_keeps_order_and_duplicates():
    """No reordering, no deduplication"""
    text = "TSH\n1.2\nTSH\n1.2"
    assert normalize_lines(text) == ["TSH", "1.2", "TSH", "1.2"]


def test_normalize_lines_windows_line_endings():
    assert normalize_lines("FT3\r\n5.27\r\n") == ["FT3", "5.27"]


def test_normalize_lines_empty():
    assert normalize_lines("") == []
    assert normalize_lines("\n  \n") == []


# ============================================================================
# VALUE PARSER
# ============================================================================

def test_parse_plain_value():
    token = parse_value_token("5.27")
    assert token.magnitude == 5.27
    assert token.qualifier == Qualifier.NONE
    assert token.raw == "5.27"


def test_parse_less_than_value():
    """'<1.3' and '1.3' both yield 1.3"""
    token = parse_value_token("<1.3")
    assert token.magnitude == 1.3
    assert token.qualifier == Qualifier.LESS_THAN
    assert parse_value_token("1.3").magnitude == token.magnitude


def test_parse_greater_than_value():
    token = parse_value_token(">81.20")
    assert token.magnitude == 81.20
    assert token.qualifier == Qualifier.GREATER_THAN
    assert token.raw == ">81.20"


def test_parse_leftmost_value_wins():
    """Value column comes before the reference range"""
    assert parse_numeric_value("5.27 pmol/L 2.77-6.31") == 5.27


def test_parse_value_inside_text():
    assert parse_numeric_value("result: 0.565 μIU/mL") == 0.565


def test_parse_integer_value():
    assert parse_numeric_value("TPO 81") == 81.0


def test_parse_trailing_positive_mark():
    """'0.269+' keeps only the number"""
    assert parse_numeric_value("0.269+") == 0.269


def test_parse_trailing_decimal_point():
    assert parse_numeric_value("12.") == 12.0


@pytest.mark.parametrize("line", ["", "pmol/L", "...", ".", "<", "阴性"])
def test_parse_no_value(line):
    """Lines without digits yield nothing"""
    assert parse_value_token(line) is None


# ============================================================================
# LABEL REMOVAL
# ============================================================================

ALIASES = ("游离三碘甲状腺原氨酸", "A-TPO", "TPO", "FT3", "FT4")


def test_strip_aliases_removes_label_digits():
    assert strip_aliases("FT3", ALIASES) == ""
    assert strip_aliases("FT4 21.10", ALIASES) == "21.10"


def test_strip_aliases_longest_first():
    """'A-TPO' is removed whole"""
    assert strip_aliases("A-TPO 81.20", ALIASES) == "81.20"


def test_read_candidate_ignores_label_digits():
    assert read_candidate("游离三碘甲状腺原氨酸(FT3)", ALIASES) is None
    assert read_candidate("游离三碘甲状腺原氨酸(FT3) 4.12", ALIASES).magnitude == 4.12


def test_parse_takes_label_digit():
    """The parser alone reads the '3' of 'FT3'; label removal happens before it"""
    assert parse_numeric_value("FT3 ...") == 3.0


def test_read_candidate_label_without_value():
    """'FT3 ...' carries no result once the catalog labels are removed"""
    assert read_candidate("FT3 ...", get_catalog().all_aliases) is None
    assert read_candidate("FT3 ... 5.27", get_catalog().all_aliases).magnitude == 5.27


# ============================================================================
# REFERENCE RANGES
# ============================================================================

def test_is_reference_range():
    assert is_reference_range("10.44-24.38")
    assert is_reference_range(" 0 - 60 ")
    assert not is_reference_range("15.80 10.44-24.38")
    assert not is_reference_range("15.80")
    assert not is_reference_range("")


def test_read_candidate_skips_reference_range_when_enabled():
    assert read_candidate("10.44-24.38", ALIASES).magnitude == 10.44
    assert read_candidate("10.44-24.38", ALIASES, skip_reference_ranges=True) is None
    assert read_candidate("FT4 10.44-24.38", ALIASES, skip_reference_ranges=True) is None


def test_parse_reference_range_forms():
    assert parse_reference_range("0.27-4.2") == (0.27, 4.2)
    assert parse_reference_range("2.77 - 6.31") == (2.77, 6.31)
    assert parse_reference_range("<34") == (0.0, 34.0)
    assert parse_reference_range(">=10") == (10.0, float("inf"))
    assert parse_reference_range("阴性") is None
    assert parse_reference_range("") is None
