# ============================================================================
# src/thyroid_ingestion/config/extraction_config.py
# ============================================================================
"""
Extraction Heuristics
- Positional search window
- Sequential fallback activation
- Reference-range line filtering
- Report date extraction
- Indicator catalog location
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    POSITIONAL_WINDOW_SIZE: int = Field(
        default=10,
        ge=1,
        description="Number of lines, starting at the label line itself, searched for an indicator's value"
    )
    SEQUENTIAL_FALLBACK_THRESHOLD: int = Field(
        default=3,
        ge=0,
        description="Run sequential fallback when positional matching resolved fewer indicators than this"
    )
    SKIP_REFERENCE_RANGE_LINES: bool = Field(
        default=False,
        description="Never take a value from a line that is only a reference range such as '10.44-24.38'"
    )
    EXTRACT_REPORT_DATE: bool = Field(
        default=True,
        description="Also look for the examination date in the transcript"
    )
    REPORT_DATE_MAX_AGE_YEARS: int = Field(
        default=15,
        ge=0,
        description="Dates older than this are treated as OCR noise"
    )
    REPORT_DATE_FUTURE_TOLERANCE_DAYS: int = Field(
        default=2,
        ge=0,
        description="Dates at or beyond today + this many days are rejected (time zone slack)"
    )
    INDICATOR_CATALOG_PATH: Optional[Path] = Field(
        default=None,
        description="Alternative indicator catalog JSON. Defaults to the packaged catalog."
    )


extraction_settings = ExtractionSettings()
