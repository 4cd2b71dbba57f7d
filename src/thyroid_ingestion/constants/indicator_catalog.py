# ============================================================================
# src/thyroid_ingestion/constants/indicator_catalog.py
# ============================================================================
"""
Indicator Catalog
- Canonical indicator names and their surface aliases
- Plausibility ranges (wide, catch OCR mismatches)
- Units, normal ranges and display precision

The catalog is versioned JSON shipped with the package
(knowledge/indicator_catalog.json). It is loaded once and exposed as
immutable structures so it can be shared across threads.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..config import extraction_settings
from ..utils.exceptions import CatalogError

logger = logging.getLogger(__name__)

# Path: constants/ -> thyroid_ingestion/ -> knowledge/
DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "knowledge" / "indicator_catalog.json"


@dataclass(frozen=True)
class PlausibilityRange:
    """Inclusive [min, max] bounds of a physiologically possible reading."""
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class IndicatorDefinition:
    name: str
    aliases: Tuple[str, ...]
    plausibility: PlausibilityRange
    unit: str = ""
    normal_range: Optional[Tuple[float, float]] = None
    decimal_places: int = 2
    display_name: str = ""

    @property
    def normal_range_string(self) -> str:
        if self.normal_range is None:
            return ""
        low, high = self.normal_range
        return f"{low}-{high}"


@dataclass(frozen=True)
class IndicatorCatalog:
    """
    Read-only lookup tables for every known indicator.

    `indicators` keeps file order, which is the stable iteration order used
    by the positional matcher. `standard_order` is the order in which
    reports are assumed to list results (sequential fallback).
    """
    indicators: Mapping[str, IndicatorDefinition]
    standard_order: Tuple[str, ...]
    default_plausibility: PlausibilityRange
    all_aliases: Tuple[str, ...]  # every alias, longest first
    version: str = ""
    source: str = ""

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.indicators)

    def __contains__(self, name: object) -> bool:
        return name in self.indicators

    def get(self, name: str) -> Optional[IndicatorDefinition]:
        return self.indicators.get(name)

    def plausibility_for(self, name: str) -> PlausibilityRange:
        definition = self.indicators.get(name)
        if definition is None:
            return self.default_plausibility
        return definition.plausibility

    def unknown(self, names: Iterable[str]) -> Tuple[str, ...]:
        return tuple(name for name in names if name not in self.indicators)


def _parse_range(raw: Any, what: str, source: str) -> Tuple[float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise CatalogError(f"{what} must be a [min, max] pair, got {raw!r}", source)
    try:
        low, high = float(raw[0]), float(raw[1])
    except (TypeError, ValueError) as e:
        raise CatalogError(f"{what} has non-numeric bounds {raw!r}", source) from e
    if low > high:
        raise CatalogError(f"{what} has min {low} greater than max {high}", source)
    return low, high


def _parse_indicator(entry: Dict[str, Any], source: str) -> IndicatorDefinition:
    try:
        name = entry["name"]
        aliases = entry["aliases"]
        plausibility = entry["plausibility"]
    except KeyError as e:
        raise CatalogError(f"Indicator entry missing key {e}", source) from e
    except TypeError as e:
        raise CatalogError(f"Indicator entry must be an object, got {entry!r}", source) from e

    if not isinstance(name, str) or not name:
        raise CatalogError(f"Indicator name must be a non-empty string, got {name!r}", source)
    if (
        not isinstance(aliases, list)
        or not aliases
        or not all(isinstance(alias, str) and alias for alias in aliases)
    ):
        raise CatalogError(f"{name}: aliases must be a non-empty list of strings", source)

    low, high = _parse_range(plausibility, f"{name}: plausibility", source)
    normal_range = None
    if entry.get("normal_range") is not None:
        normal_range = _parse_range(entry["normal_range"], f"{name}: normal_range", source)

    return IndicatorDefinition(
        name=name,
        aliases=tuple(aliases),
        plausibility=PlausibilityRange(low, high),
        unit=entry.get("unit", ""),
        normal_range=normal_range,
        decimal_places=int(entry.get("decimal_places", 2)),
        display_name=entry.get("display_name", name),
    )


def load_catalog(path: Optional[Path] = None) -> IndicatorCatalog:
    """
    Load and validate an indicator catalog JSON file.

    Args:
        path: Catalog file. Defaults to the packaged catalog.

    Returns:
        Immutable IndicatorCatalog

    Raises:
        CatalogError: file missing, invalid JSON, or inconsistent content
    """
    path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    source = str(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Indicator catalog not found: {path}", source) from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Indicator catalog is not valid JSON: {e}", source) from e

    if not isinstance(data, dict) or not isinstance(data.get("indicators"), list):
        raise CatalogError("Indicator catalog must contain an 'indicators' list", source)

    indicators: Dict[str, IndicatorDefinition] = {}
    alias_owner: Dict[str, str] = {}
    for entry in data["indicators"]:
        definition = _parse_indicator(entry, source)
        if definition.name in indicators:
            raise CatalogError(f"Duplicate indicator name {definition.name!r}", source)
        for alias in definition.aliases:
            owner = alias_owner.setdefault(alias, definition.name)
            if owner != definition.name:
                raise CatalogError(
                    f"Alias {alias!r} is claimed by both {owner} and {definition.name}",
                    source
                )
        indicators[definition.name] = definition

    standard_order = tuple(data.get("standard_order") or indicators)
    unknown = [name for name in standard_order if name not in indicators]
    if unknown:
        raise CatalogError(f"standard_order references unknown indicators {unknown}", source)

    default_low, default_high = _parse_range(
        data.get("default_plausibility", [0, 1000]), "default_plausibility", source
    )

    catalog = IndicatorCatalog(
        indicators=MappingProxyType(indicators),
        standard_order=standard_order,
        default_plausibility=PlausibilityRange(default_low, default_high),
        all_aliases=tuple(sorted(alias_owner, key=len, reverse=True)),
        version=str(data.get("version", "")),
        source=source,
    )
    logger.debug(
        f"Loaded indicator catalog v{catalog.version} from {source}: {list(catalog.names)}"
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> IndicatorCatalog:
    """Process-wide catalog (INDICATOR_CATALOG_PATH or the packaged default)."""
    return load_catalog(extraction_settings.INDICATOR_CATALOG_PATH)


def get_indicator(name: str) -> Optional[IndicatorDefinition]:
    """Look up an indicator definition by canonical name."""
    return get_catalog().get(name)


def format_indicator_value(name: str, value: float) -> str:
    """
    Format a value with the indicator's display precision.

    TSH is shown with 3 decimals, everything else with 2.
    """
    definition = get_indicator(name)
    places = definition.decimal_places if definition else 2
    return f"{value:.{places}f}"


# Convenience views over the default catalog
_catalog = get_catalog()
INDICATOR_NAMES = _catalog.names
STANDARD_ORDER = _catalog.standard_order
PLAUSIBILITY_RANGES = MappingProxyType({
    name: (definition.plausibility.min, definition.plausibility.max)
    for name, definition in _catalog.indicators.items()
})
