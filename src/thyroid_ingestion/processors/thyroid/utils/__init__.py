from .parsing import (
    normalize_lines,
    parse_value_token,
    parse_numeric_value,
    strip_aliases,
    is_reference_range,
    parse_reference_range,
    read_candidate,
)

__all__ = [
    'normalize_lines',
    'parse_value_token',
    'parse_numeric_value',
    'strip_aliases',
    'is_reference_range',
    'parse_reference_range',
    'read_candidate',
]
