# ============================================================================
# src/thyroid_ingestion/core/context/extracted_value.py
# ============================================================================
"""
Extraction value objects
- NumericToken: a parsed number with its qualifier
- IndicatorMatch: provenance of one resolved indicator
- ExtractionResult: the artifact returned to callers
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from .enums import IndicatorStatus, MatchMethod, Qualifier


@dataclass(frozen=True)
class NumericToken:
    magnitude: float
    qualifier: Qualifier = Qualifier.NONE
    raw: str = ""  # matched substring, qualifier included


@dataclass(frozen=True)
class IndicatorMatch:
    indicator: str
    token: NumericToken
    method: MatchMethod

    # Provenance
    line_index: int
    source_line: str
    anchor_line_index: Optional[int] = None  # label line, positional matches only

    @property
    def value(self) -> float:
        return self.token.magnitude

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.token.magnitude,
            "qualifier": self.token.qualifier.value,
            "method": self.method.value,
            "line_index": self.line_index,
            "source_line": self.source_line,
            "anchor_line_index": self.anchor_line_index,
        }


@dataclass
class ExtractionResult:
    """
    Outcome of one extraction call.

    `indicators` is the public mapping (indicator name -> magnitude), ordered
    by the catalog's standard order. `statuses` grades each value against the
    normal ranges of the catalog the engine used. Everything else is
    diagnostic.
    """
    indicators: Dict[str, float] = field(default_factory=dict)
    statuses: Dict[str, IndicatorStatus] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)
    raw_text: str = ""
    matches: Dict[str, IndicatorMatch] = field(default_factory=dict)
    requested: List[str] = field(default_factory=list)
    fallback_used: bool = False
    report_date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return not self.indicators

    @property
    def missing(self) -> List[str]:
        """Requested indicators that were not resolved."""
        return [name for name in self.requested if name not in self.indicators]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "indicators": dict(self.indicators),
            "statuses": {name: status.value for name, status in self.statuses.items()},
            "missing": self.missing,
            "fallback_used": self.fallback_used,
            "report_date": self.report_date.isoformat() if self.report_date else None,
            "matches": {name: match.to_dict() for name, match in self.matches.items()},
            "lines": list(self.lines),
            "raw_text": self.raw_text,
        }
