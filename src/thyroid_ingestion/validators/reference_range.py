# ============================================================================
# FILE: src/thyroid_ingestion/validators/reference_range.py
# ============================================================================
"""
Normal-range assessment of extracted indicator values.
"""

import logging
from typing import Dict, Mapping, Optional

from ..constants import IndicatorCatalog, get_catalog
from ..core.context.enums import IndicatorStatus
from ..processors.thyroid.utils.parsing import parse_reference_range

logger = logging.getLogger(__name__)


def determine_status(value: float, normal_range: str) -> IndicatorStatus:
    """
    Classify a value against a printed normal range.

    Accepts "0.27-4.2", "<34" and ">10" forms. A range that cannot be
    parsed classifies as normal.
    """
    bounds = parse_reference_range(normal_range)
    if bounds is None:
        return IndicatorStatus.NORMAL

    low, high = bounds
    if value < low:
        return IndicatorStatus.LOW
    if value > high:
        return IndicatorStatus.HIGH
    return IndicatorStatus.NORMAL


def assess_indicator(
    name: str,
    value: float,
    catalog: Optional[IndicatorCatalog] = None
) -> IndicatorStatus:
    """Classify a value against the catalog normal range of an indicator."""
    definition = (catalog or get_catalog()).get(name)
    if definition is None or definition.normal_range is None:
        return IndicatorStatus.NORMAL

    low, high = definition.normal_range
    if value < low:
        return IndicatorStatus.LOW
    if value > high:
        return IndicatorStatus.HIGH
    return IndicatorStatus.NORMAL


def assess_indicators(
    values: Mapping[str, float],
    catalog: Optional[IndicatorCatalog] = None
) -> Dict[str, IndicatorStatus]:
    """Status for every entry of an indicator -> value mapping."""
    catalog = catalog or get_catalog()
    statuses = {name: assess_indicator(name, value, catalog) for name, value in values.items()}
    abnormal = {name: s.value for name, s in statuses.items() if s != IndicatorStatus.NORMAL}
    if abnormal:
        logger.debug(f"Abnormal indicators: {abnormal}")
    return statuses
