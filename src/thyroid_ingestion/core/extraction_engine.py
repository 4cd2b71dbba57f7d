# ============================================================================
# src/thyroid_ingestion/core/extraction_engine.py
# ============================================================================
"""
Indicator Extraction Engine

Turns the OCR transcript of a thyroid panel into {indicator: value}.

Pipeline:
1. Normalize lines
2. Positional matching (label-anchored window search)
3. Sequential fallback, only when step 2 resolved too few indicators
4. Report date lookup (optional)

The engine is stateless between calls: every call builds its own
accumulator, and the catalog it reads is immutable. One instance can be
shared across threads.

Usage:
    from thyroid_ingestion.core import IndicatorExtractionEngine

    engine = IndicatorExtractionEngine()
    result = engine.extract(ocr_text)
    result.indicators  # {"FT3": 5.27, "TSH": 0.565, ...}
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..config import ExtractionSettings, extraction_settings
from ..constants import IndicatorCatalog, get_catalog, load_catalog
from ..extractors.date_extractor import extract_report_date
from ..processors.thyroid.positional_matcher import PositionalMatcher
from ..processors.thyroid.sequential_matcher import SequentialMatcher
from ..processors.thyroid.utils.parsing import normalize_lines
from ..utils.exceptions import ConfigurationError, InvalidInputError
from ..utils.logging import log_performance
from ..validators.plausibility import RangeValidator
from ..validators.reference_range import assess_indicators
from .context.extracted_value import ExtractionResult, IndicatorMatch

logger = logging.getLogger(__name__)


class IndicatorExtractionEngine:
    """
    Coordinates positional matching and the sequential fallback.

    Window size and fallback threshold come from ExtractionSettings unless
    overridden here.
    """

    def __init__(
        self,
        catalog: Optional[IndicatorCatalog] = None,
        settings: Optional[ExtractionSettings] = None,
        window_size: Optional[int] = None,
        fallback_threshold: Optional[int] = None
    ):
        self.settings = settings or extraction_settings
        self.catalog = catalog or self._load_catalog(self.settings)

        self.window_size = (
            window_size if window_size is not None
            else self.settings.POSITIONAL_WINDOW_SIZE
        )
        self.fallback_threshold = (
            fallback_threshold if fallback_threshold is not None
            else self.settings.SEQUENTIAL_FALLBACK_THRESHOLD
        )
        if self.window_size < 1:
            raise ConfigurationError(f"window_size must be >= 1, got {self.window_size}")
        if self.fallback_threshold < 0:
            raise ConfigurationError(
                f"fallback_threshold must be >= 0, got {self.fallback_threshold}"
            )

        validator = RangeValidator(self.catalog)
        skip_ranges = self.settings.SKIP_REFERENCE_RANGE_LINES
        self.positional = PositionalMatcher(
            self.catalog, validator, self.window_size, skip_ranges
        )
        self.sequential = SequentialMatcher(self.catalog, validator, skip_ranges)

    @staticmethod
    def _load_catalog(settings: ExtractionSettings) -> IndicatorCatalog:
        """Catalog named by the settings, else the shared default."""
        if settings.INDICATOR_CATALOG_PATH is not None:
            return load_catalog(settings.INDICATOR_CATALOG_PATH)
        return get_catalog()

    def _requested(self, indicators: Optional[Iterable[str]]) -> List[str]:
        """Requested indicators in catalog order (all of them by default)."""
        if indicators is None:
            return list(self.catalog.names)
        if isinstance(indicators, str):
            indicators = [indicators]

        try:
            wanted = set(indicators)
        except TypeError as e:
            raise InvalidInputError(f"indicators must be an iterable of names: {e}") from e

        unknown = sorted(str(name) for name in self.catalog.unknown(wanted))
        if unknown:
            raise InvalidInputError(
                f"Unknown indicators {unknown}; known: {list(self.catalog.names)}"
            )
        return [name for name in self.catalog.names if name in wanted]

    def _expected_order(self, requested: List[str]) -> List[str]:
        """Standard report order restricted to the requested indicators."""
        order = [name for name in self.catalog.standard_order if name in requested]
        order.extend(name for name in requested if name not in order)
        return order

    @log_performance(logger, "Indicator extraction")
    def extract(
        self,
        text: str,
        indicators: Optional[Iterable[str]] = None
    ) -> ExtractionResult:
        """
        Extract indicator values from an OCR transcript.

        Args:
            text: Newline-joined OCR lines in reading order
            indicators: Restrict extraction to these indicator names
                (e.g. the panel type being scanned). Defaults to all.

        Returns:
            ExtractionResult; empty mapping when nothing plausible is found

        Raises:
            InvalidInputError: text is not a string, or an indicator name is
                not in the catalog
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"text must be a string, got {type(text).__name__}"
            )

        requested = self._requested(indicators)
        order = self._expected_order(requested)
        lines = normalize_lines(text)

        result = ExtractionResult(lines=lines, raw_text=text, requested=order)
        if not lines:
            logger.info("Empty transcript, nothing to extract")
            return result

        matches: Dict[str, IndicatorMatch] = self.positional.match(lines, requested)
        logger.debug(f"Positional matching resolved {len(matches)}: {list(matches)}")

        if len(matches) < self.fallback_threshold:
            result.fallback_used = True
            fallback = self.sequential.match(lines, order, resolved=frozenset(matches))
            logger.debug(f"Sequential fallback resolved {len(fallback)}: {list(fallback)}")
            matches.update(fallback)

        result.matches = {name: matches[name] for name in order if name in matches}
        result.indicators = {name: m.value for name, m in result.matches.items()}
        result.statuses = assess_indicators(result.indicators, self.catalog)

        if self.settings.EXTRACT_REPORT_DATE:
            result.report_date = extract_report_date(text, settings=self.settings)

        logger.info(
            f"Extracted {len(result.indicators)}/{len(order)} indicators: {result.indicators}"
        )
        for name in result.missing:
            logger.debug(f"  {name}: not found")

        return result


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_engine: Optional[IndicatorExtractionEngine] = None


def get_engine() -> IndicatorExtractionEngine:
    """Shared engine built from the default catalog and settings."""
    global _default_engine
    if _default_engine is None:
        _default_engine = IndicatorExtractionEngine()
    return _default_engine


def extract_indicators(
    text: str,
    indicators: Optional[Iterable[str]] = None
) -> ExtractionResult:
    """Extract indicators with the shared engine."""
    return get_engine().extract(text, indicators)
