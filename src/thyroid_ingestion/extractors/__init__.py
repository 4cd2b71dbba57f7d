# ============================================================================
# src/thyroid_ingestion/extractors/__init__.py
# ============================================================================
"""
Report metadata extractors that run beside the indicator engine.
"""

from .date_extractor import extract_report_date, is_reasonable_date, DATE_PATTERNS
from .checkup_extractor import extract_checkup_name

__all__ = [
    'extract_report_date',
    'is_reasonable_date',
    'DATE_PATTERNS',
    'extract_checkup_name',
]
