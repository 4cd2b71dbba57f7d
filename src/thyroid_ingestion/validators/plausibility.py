# ============================================================================
# FILE: src/thyroid_ingestion/validators/plausibility.py
# ============================================================================
"""
Plausibility Checks

Rejects numbers that cannot be the indicator's result (a page number or a
sample ID picked up next to a label). Different from normal ranges: these
are "physically possible" boundaries, deliberately wide so abnormal but
real results are kept.

Example:
- TSH 999999 → FAIL (page/sample number, not a reading)
- TSH 45.2   → PASS (very high but possible)
"""

import logging
from typing import Optional

from ..constants import IndicatorCatalog, PlausibilityRange, get_catalog


logger = logging.getLogger(__name__)


class RangeValidator:
    """
    Check whether a candidate value is plausible for an indicator.

    Pure filter: never suggests or applies corrections. Indicators missing
    from the catalog fall back to the catalog's default range [0, 1000].
    """

    def __init__(self, catalog: Optional[IndicatorCatalog] = None):
        self.catalog = catalog or get_catalog()

    def get_range(self, indicator: str) -> PlausibilityRange:
        return self.catalog.plausibility_for(indicator)

    def is_plausible(self, value: float, indicator: str) -> bool:
        """
        Args:
            value: Candidate magnitude
            indicator: Canonical indicator name (e.g. "TSH")

        Returns:
            True if value lies within the inclusive plausibility range
        """
        bounds = self.get_range(indicator)
        if bounds.contains(value):
            return True

        logger.debug(
            f"{indicator}: {value} outside plausible range [{bounds.min}, {bounds.max}]"
        )
        return False


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def is_plausible(value: float, indicator: str) -> bool:
    """Quick plausibility check against the default catalog."""
    return RangeValidator().is_plausible(value, indicator)


def get_plausibility_range(indicator: str) -> PlausibilityRange:
    """Plausibility range for an indicator (default range if unknown)."""
    return RangeValidator().get_range(indicator)
