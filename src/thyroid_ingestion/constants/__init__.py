# ============================================================================
# src/thyroid_ingestion/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .indicator_catalog import (
    DEFAULT_CATALOG_PATH,
    INDICATOR_NAMES,
    STANDARD_ORDER,
    PLAUSIBILITY_RANGES,
    PlausibilityRange,
    IndicatorDefinition,
    IndicatorCatalog,
    load_catalog,
    get_catalog,
    get_indicator,
    format_indicator_value,
)
