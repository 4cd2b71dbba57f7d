# ============================================================================
# src/thyroid_ingestion/utils/__init__.py
# ============================================================================
"""
Utility modules for the thyroid ingestion engine.
"""

from .exceptions import (
    ThyroidIngestionError,
    InvalidInputError,
    CatalogError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'ThyroidIngestionError',
    'InvalidInputError',
    'CatalogError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
]
