# ============================================================================
# src/thyroid_ingestion/__init__.py
# ============================================================================
"""
Thyroid Panel Ingestion

Extracts thyroid function indicators (FT3, FT4, TSH, TG, TPO) from the
OCR transcript of a lab report.
"""

from .core import (
    IndicatorExtractionEngine,
    ExtractionResult,
    IndicatorMatch,
    NumericToken,
    Qualifier,
    extract_indicators,
)
from .utils.exceptions import ThyroidIngestionError, InvalidInputError, CatalogError

__version__ = "0.1.0"

__all__ = [
    'IndicatorExtractionEngine',
    'ExtractionResult',
    'IndicatorMatch',
    'NumericToken',
    'Qualifier',
    'extract_indicators',
    'ThyroidIngestionError',
    'InvalidInputError',
    'CatalogError',
]
