# ============================================================================
# FILE: tests/unit/test_positional_matcher.py
# ============================================================================
"""
Unit tests for label-anchored positional matching
"""

from thyroid_ingestion.core.context import MatchMethod, Qualifier
from thyroid_ingestion.processors.thyroid.positional_matcher import PositionalMatcher


def _values(matches):
    return {name: match.value for name, match in matches.items()}


def test_stacked_cells(stacked_panel_lines):
    """Each label is followed by its value on the next line"""
    matches = PositionalMatcher().match(stacked_panel_lines)

    assert _values(matches) == {
        "FT3": 5.27, "FT4": 21.10, "TSH": 0.565, "TPO": 81.20, "TG": 1.3
    }
    assert matches["TG"].token.qualifier == Qualifier.LESS_THAN
    assert all(m.method == MatchMethod.POSITIONAL for m in matches.values())


def test_value_on_label_line():
    matches = PositionalMatcher().match(["FT4 15.80 pmol/L 10.44-24.38"])
    assert matches["FT4"].value == 15.80
    assert matches["FT4"].line_index == 0
    assert matches["FT4"].anchor_line_index == 0


def test_value_within_window():
    """FT3 on line 2, value on line 4"""
    lines = ["Thyroid panel", "FT3", "pmol/L", "5.27"]
    match = PositionalMatcher().match(lines)["FT3"]

    assert match.value == 5.27
    assert match.anchor_line_index == 1
    assert match.line_index == 3
    assert match.source_line == "5.27"


def test_value_beyond_window_ignored():
    """Window covers the label line and the 9 lines after it"""
    filler = ["note"] * 10
    lines = ["FT3"] + filler + ["5.27"]
    assert "FT3" not in PositionalMatcher().match(lines)


def test_value_on_last_window_line():
    lines = ["FT3"] + ["note"] * 8 + ["5.27"]
    assert PositionalMatcher().match(lines)["FT3"].line_index == 9


def test_custom_window_size():
    lines = ["TSH", "note", "note", "1.25"]
    assert "TSH" not in PositionalMatcher(window_size=3).match(lines)
    assert PositionalMatcher(window_size=4).match(lines)["TSH"].value == 1.25


def test_implausible_value_skipped_and_scan_continues():
    """Range rejection moves on to the next window line"""
    lines = ["TSH 999999", "0.565"]
    assert PositionalMatcher().match(lines)["TSH"].value == 0.565


def test_implausible_only_value_not_recorded():
    assert PositionalMatcher().match(["TSH 999999"]) == {}


def test_label_without_digits_continues():
    """'FT3 ...' yields no value; scanning continues below"""
    lines = ["FT3 ...", "5.27"]
    match = PositionalMatcher().match(lines)["FT3"]
    assert match.value == 5.27
    assert match.line_index == 1


def test_label_digits_not_taken_as_value():
    """The '4' in 'FT4' is never read as FT3's value"""
    lines = ["FT3", "FT4", "5.27", "18.20"]
    matches = PositionalMatcher().match(lines)
    assert matches["FT3"].value == 5.27
    assert matches["FT4"].value == 5.27


def test_first_match_wins():
    lines = ["TSH 1.10", "TSH 2.20"]
    match = PositionalMatcher().match(lines)["TSH"]
    assert match.value == 1.10
    assert match.line_index == 0


def test_chinese_aliases():
    lines = ["促甲状腺激素 2.345", "游离甲状腺素", "15.80"]
    matches = PositionalMatcher().match(lines)
    assert matches["TSH"].value == 2.345
    assert matches["FT4"].value == 15.80


def test_antibody_aliases():
    lines = ["A-TPO 12.60", "TGAb <1.30"]
    matches = PositionalMatcher().match(lines)
    assert matches["TPO"].value == 12.60
    assert matches["TG"].value == 1.30


def test_aliases_are_case_sensitive():
    assert PositionalMatcher().match(["tsh 1.2"]) == {}


def test_one_line_anchors_several_indicators():
    """Overlapping windows are searched independently"""
    lines = ["FT3 FT4", "5.27", "21.10"]
    matches = PositionalMatcher().match(lines)
    assert matches["FT3"].value == 5.27
    assert matches["FT4"].value == 5.27


def test_restricted_indicators():
    lines = ["FT3 5.27", "TSH 0.565"]
    matches = PositionalMatcher().match(lines, indicators=["TSH"])
    assert list(matches) == ["TSH"]


def test_resolved_indicators_skipped():
    lines = ["FT3 5.27", "TSH 0.565"]
    matches = PositionalMatcher().match(lines, resolved={"FT3"})
    assert "FT3" not in matches
    assert matches["TSH"].value == 0.565


def test_skip_reference_range_lines():
    lines = ["FT4", "10.44-24.38", "15.80"]
    assert PositionalMatcher(skip_reference_ranges=False).match(lines)["FT4"].value == 10.44
    assert PositionalMatcher(skip_reference_ranges=True).match(lines)["FT4"].value == 15.80


def test_no_labels():
    assert PositionalMatcher().match(["5.27", "21.10"]) == {}
