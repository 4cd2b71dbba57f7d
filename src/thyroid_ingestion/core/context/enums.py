# ============================================================================
# src/thyroid_ingestion/core/context/enums.py
# ============================================================================
"""
Extraction Enums
- Value qualifiers
- Match provenance
- Indicator status
"""

from enum import Enum


class Qualifier(str, Enum):
    NONE = "none"
    LESS_THAN = "less_than"        # "<1.3": below detection threshold
    GREATER_THAN = "greater_than"  # ">1000": above measurable range


class MatchMethod(str, Enum):
    POSITIONAL = "positional"
    SEQUENTIAL = "sequential"


class IndicatorStatus(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
