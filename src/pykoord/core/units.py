"""Linear units and prime meridians."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Unit:
    """Linear unit of a projected CRS.

    Attributes:
        code: PROJ unit identifier (e.g. "us-ft").
        to_meter: Length of one unit in meters.
        name: Human readable name.
    """

    code: str
    to_meter: float
    name: str = ""


@dataclass(frozen=True)
class PrimeMeridian:
    """Named prime meridian, longitude in degrees east of Greenwich."""

    code: str
    longitude: float


# PROJ linear units
UNITS: dict[str, Unit] = {
    u.code: u
    for u in (
        Unit("m", 1.0, "Meter"),
        Unit("km", 1000.0, "Kilometer"),
        Unit("dm", 0.1, "Decimeter"),
        Unit("cm", 0.01, "Centimeter"),
        Unit("mm", 0.001, "Millimeter"),
        Unit("kmi", 1852.0, "International Nautical Mile"),
        Unit("in", 0.0254, "International Inch"),
        Unit("ft", 0.3048, "International Foot"),
        Unit("yd", 0.9144, "International Yard"),
        Unit("mi", 1609.344, "International Statute Mile"),
        Unit("fath", 1.8288, "International Fathom"),
        Unit("ch", 20.1168, "International Chain"),
        Unit("link", 0.201168, "International Link"),
        Unit("us-in", 1.0 / 39.37, "U.S. Surveyor's Inch"),
        Unit("us-ft", 0.304800609601219, "U.S. Surveyor's Foot"),
        Unit("us-yd", 0.914401828803658, "U.S. Surveyor's Yard"),
        Unit("us-ch", 20.11684023368047, "U.S. Surveyor's Chain"),
        Unit("us-mi", 1609.347218694437, "U.S. Surveyor's Statute Mile"),
        Unit("ind-yd", 0.91439523, "Indian Yard"),
        Unit("ind-ft", 0.30479841, "Indian Foot"),
        Unit("ind-ch", 20.11669506, "Indian Chain"),
    )
}

PRIME_MERIDIANS: dict[str, PrimeMeridian] = {
    p.code: p
    for p in (
        PrimeMeridian("greenwich", 0.0),
        PrimeMeridian("lisbon", -9.131906111111),
        PrimeMeridian("paris", 2.337229166667),
        PrimeMeridian("bogota", -74.080916666667),
        PrimeMeridian("madrid", -3.687938888889),
        PrimeMeridian("rome", 12.452333333333),
        PrimeMeridian("bern", 7.439583333333),
        PrimeMeridian("jakarta", 106.807719444444),
        PrimeMeridian("ferro", -17.666666666667),
        PrimeMeridian("brussels", 4.367975),
        PrimeMeridian("stockholm", 18.058277777778),
        PrimeMeridian("athens", 23.7163375),
        PrimeMeridian("oslo", 10.722916666667),
    )
}

GREENWICH = PRIME_MERIDIANS["greenwich"]
