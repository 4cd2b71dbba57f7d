# ============================================================================
# src/thyroid_ingestion/processors/__init__.py
# ============================================================================
"""
Report processors. Each report family gets its own sub-package with the
matchers that turn normalized OCR lines into indicator values.
"""
