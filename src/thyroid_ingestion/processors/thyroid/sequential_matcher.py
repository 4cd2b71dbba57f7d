# ============================================================================
# src/thyroid_ingestion/processors/thyroid/sequential_matcher.py
# ============================================================================
"""
Sequential Fallback Matcher

Last resort when labels were not recognised: assumes the report lists its
results in a fixed order (FT3, FT4, TSH, TPO, TG) and pairs the i-th
indicator of that order with the i-th numeric line of the transcript.

The order reflects one clinic's report layout and has not been checked
against other layouts.
"""

import logging
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from ...config import extraction_settings
from ...constants import IndicatorCatalog, get_catalog
from ...core.context.enums import MatchMethod
from ...core.context.extracted_value import IndicatorMatch, NumericToken
from ...validators.plausibility import RangeValidator
from .utils.parsing import read_candidate

logger = logging.getLogger(__name__)


class SequentialMatcher:
    """Order-based alignment of numeric lines to indicators."""

    def __init__(
        self,
        catalog: Optional[IndicatorCatalog] = None,
        validator: Optional[RangeValidator] = None,
        skip_reference_ranges: Optional[bool] = None
    ):
        self.catalog = catalog or get_catalog()
        self.validator = validator or RangeValidator(self.catalog)
        self.skip_reference_ranges = (
            skip_reference_ranges if skip_reference_ranges is not None
            else extraction_settings.SKIP_REFERENCE_RANGE_LINES
        )

    def collect_candidates(self, lines: Sequence[str]) -> List[Tuple[int, NumericToken]]:
        """Every (line_index, token) pair in document order."""
        candidates = []
        for index, line in enumerate(lines):
            token = read_candidate(line, self.catalog.all_aliases, self.skip_reference_ranges)
            if token is not None:
                candidates.append((index, token))
        return candidates

    def match(
        self,
        lines: Sequence[str],
        order: Optional[Sequence[str]] = None,
        resolved: AbstractSet[str] = frozenset()
    ) -> Dict[str, IndicatorMatch]:
        """
        Args:
            lines: Normalized OCR lines
            order: Expected indicator order. Defaults to the catalog's
                standard order.
            resolved: Indicators already settled; their slot is consumed
                but never overwritten

        Returns:
            {indicator: IndicatorMatch} for newly resolved indicators
        """
        order = list(order) if order is not None else list(self.catalog.standard_order)
        candidates = self.collect_candidates(lines)
        logger.debug(f"Sequential fallback: {len(candidates)} numeric lines for {order}")

        matches: Dict[str, IndicatorMatch] = {}
        for position, name in enumerate(order):
            if position >= len(candidates):
                break
            if name in resolved:
                continue

            index, token = candidates[position]
            if not self.validator.is_plausible(token.magnitude, name):
                logger.debug(f"  {name}: rejected {token.raw} on line {index}")
                continue

            logger.debug(f"  {name} = {token.magnitude} (line {index}, position {position})")
            matches[name] = IndicatorMatch(
                indicator=name,
                token=token,
                method=MatchMethod.SEQUENTIAL,
                line_index=index,
                source_line=lines[index],
            )

        return matches
