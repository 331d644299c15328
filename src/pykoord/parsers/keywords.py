"""PROJ.4 keywords understood by the parameter parser."""

from __future__ import annotations

from typing import Iterable

from pykoord.errors import UnsupportedParameter

# Keys that carry a meaning for CRS construction
SUPPORTED_KEYWORDS: frozenset[str] = frozenset({
    "a", "b", "rf", "f", "es", "R", "R_A", "ellps", "datum",
    "towgs84", "nadgrids",
    "proj", "lat_0", "lat_1", "lat_2", "lat_ts", "lon_0", "lonc",
    "alpha", "gamma", "k", "k_0", "x_0", "y_0", "h", "zone", "south",
    "units", "to_meter", "pm", "axis",
})

# Keys accepted for compatibility that do not change the CRS
IGNORED_KEYWORDS: frozenset[str] = frozenset({
    "no_defs", "wktext", "type", "title", "over", "no_uoff",
})


def is_supported(key: str) -> bool:
    return key in SUPPORTED_KEYWORDS or key in IGNORED_KEYWORDS


def check_unsupported(keys: Iterable[str]) -> None:
    """Raise UnsupportedParameter for the first key that is not a PROJ.4 keyword."""
    for key in keys:
        if not is_supported(key):
            raise UnsupportedParameter(key)
