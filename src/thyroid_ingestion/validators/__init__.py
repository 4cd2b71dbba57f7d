# ============================================================================
# FILE: src/thyroid_ingestion/validators/__init__.py
# ============================================================================
"""
Validators Package

- Plausibility checks (reject impossible candidate values)
- Normal-range assessment (low / normal / high)
"""

from .plausibility import (
    RangeValidator,
    is_plausible,
    get_plausibility_range,
)

from .reference_range import (
    determine_status,
    assess_indicator,
    assess_indicators,
)

__all__ = [
    # Plausibility checks
    'RangeValidator',
    'is_plausible',
    'get_plausibility_range',

    # Normal-range assessment
    'determine_status',
    'assess_indicator',
    'assess_indicators',
]
