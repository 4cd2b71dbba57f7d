# ============================================================================
# src/thyroid_ingestion/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the thyroid ingestion engine.

Heuristic misses are never errors: an extraction that finds nothing returns
an empty result. These exceptions are reserved for malformed invocations and
broken static configuration.
"""

from typing import Optional


class ThyroidIngestionError(Exception):
    """Base exception for all thyroid ingestion errors."""
    pass


class InvalidInputError(ThyroidIngestionError):
    """Extraction was invoked with input that violates its contract."""
    pass


class CatalogError(ThyroidIngestionError):
    """Indicator catalog is missing or malformed."""
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ConfigurationError(ThyroidIngestionError):
    """Invalid configuration."""
    pass
