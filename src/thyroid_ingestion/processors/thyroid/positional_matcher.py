# ============================================================================
# src/thyroid_ingestion/processors/thyroid/positional_matcher.py
# ============================================================================
"""
Positional Matcher

Finds indicator labels in the OCR lines and takes the first plausible value
found at or below the label, within a bounded window of lines. OCR engines
often emit a table row as separate lines ("FT3", "5.27", "pmol/L", ...),
so the value is rarely on the label line itself.
"""

import logging
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence

from ...config import extraction_settings
from ...constants import IndicatorCatalog, get_catalog
from ...core.context.enums import MatchMethod
from ...core.context.extracted_value import IndicatorMatch
from ...validators.plausibility import RangeValidator
from .utils.parsing import read_candidate

logger = logging.getLogger(__name__)


class PositionalMatcher:
    """
    Label-anchored value search.

    Rules:
    - A line anchors an indicator when it contains any of its aliases
      (case-sensitive substring).
    - Lines [anchor, anchor + window_size) are scanned in order; the first
      plausible value wins.
    - First successful assignment per indicator wins; later anchors for a
      resolved indicator are ignored.
    - Indicators are independent: one line may anchor several of them.
    """

    def __init__(
        self,
        catalog: Optional[IndicatorCatalog] = None,
        validator: Optional[RangeValidator] = None,
        window_size: Optional[int] = None,
        skip_reference_ranges: Optional[bool] = None
    ):
        self.catalog = catalog or get_catalog()
        self.validator = validator or RangeValidator(self.catalog)
        self.window_size = (
            window_size if window_size is not None
            else extraction_settings.POSITIONAL_WINDOW_SIZE
        )
        self.skip_reference_ranges = (
            skip_reference_ranges if skip_reference_ranges is not None
            else extraction_settings.SKIP_REFERENCE_RANGE_LINES
        )

    def match(
        self,
        lines: Sequence[str],
        indicators: Optional[Iterable[str]] = None,
        resolved: AbstractSet[str] = frozenset()
    ) -> Dict[str, IndicatorMatch]:
        """
        Args:
            lines: Normalized OCR lines
            indicators: Indicators to look for, in evaluation order.
                Defaults to every catalog indicator in catalog order.
            resolved: Indicators already settled elsewhere; never searched

        Returns:
            {indicator: IndicatorMatch} for every indicator found
        """
        names: List[str] = list(indicators) if indicators is not None else list(self.catalog.names)
        matches: Dict[str, IndicatorMatch] = {}

        for index, line in enumerate(lines):
            for name in names:
                if name in matches or name in resolved:
                    continue
                if not self._has_label(line, name):
                    continue

                logger.debug(f"Found {name} label on line {index}: '{line}'")
                found = self._search_window(lines, index, name)
                if found is not None:
                    matches[name] = found

        return matches

    def _has_label(self, line: str, name: str) -> bool:
        definition = self.catalog.get(name)
        if definition is None:
            return False
        return any(alias in line for alias in definition.aliases)

    def _search_window(
        self,
        lines: Sequence[str],
        anchor: int,
        name: str
    ) -> Optional[IndicatorMatch]:
        end = min(anchor + self.window_size, len(lines))

        for index in range(anchor, end):
            token = read_candidate(
                lines[index], self.catalog.all_aliases, self.skip_reference_ranges
            )
            if token is None:
                continue
            if not self.validator.is_plausible(token.magnitude, name):
                logger.debug(f"  {name}: rejected {token.raw} on line {index}")
                continue

            logger.debug(f"  {name} = {token.magnitude} (line {index}, anchor {anchor})")
            return IndicatorMatch(
                indicator=name,
                token=token,
                method=MatchMethod.POSITIONAL,
                line_index=index,
                source_line=lines[index],
                anchor_line_index=anchor,
            )

        logger.debug(f"  {name}: no plausible value in lines {anchor}-{end - 1}")
        return None
