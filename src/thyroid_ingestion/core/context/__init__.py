# ============================================================================
# src/thyroid_ingestion/core/context/__init__.py
# ============================================================================
"""
Value objects shared by the extraction pipeline.
"""

from .enums import Qualifier, MatchMethod, IndicatorStatus
from .extracted_value import NumericToken, IndicatorMatch, ExtractionResult

__all__ = [
    'Qualifier',
    'MatchMethod',
    'IndicatorStatus',
    'NumericToken',
    'IndicatorMatch',
    'ExtractionResult',
]
