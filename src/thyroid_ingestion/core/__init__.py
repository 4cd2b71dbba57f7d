# ============================================================================
# src/thyroid_ingestion/core/__init__.py
# ============================================================================
"""
Core extraction engine and its value objects.
"""

from .context import (
    Qualifier,
    MatchMethod,
    IndicatorStatus,
    NumericToken,
    IndicatorMatch,
    ExtractionResult,
)
from .extraction_engine import IndicatorExtractionEngine, get_engine, extract_indicators

__all__ = [
    'Qualifier',
    'MatchMethod',
    'IndicatorStatus',
    'NumericToken',
    'IndicatorMatch',
    'ExtractionResult',
    'IndicatorExtractionEngine',
    'get_engine',
    'extract_indicators',
]
