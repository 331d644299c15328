"""Immutable coordinate reference system description."""

from __future__ import annotations

from dataclasses import dataclass

from pykoord.core.datum import Datum
from pykoord.core.ellipsoid import Ellipsoid
from pykoord.core.projection import Projection
from pykoord.core.units import GREENWICH, PrimeMeridian, Unit


def format_number(value: float) -> str:
    """Shortest exact text for a float ("1000000", "58.5")."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class CoordinateReferenceSystem:
    """Fully resolved description of a coordinate reference system.

    Built by the parsers, never mutated afterwards. Holds everything
    needed to set up a coordinate transform: projection method and
    parameters, datum with its ellipsoid, linear units and prime meridian.

    Attributes:
        name: CRS name (e.g. "EPSG:3005"), or None for an anonymous CRS.
        parameters: Ordered PROJ.4 tokens the CRS was built from.
        datum: Geodetic datum.
        projection: Projection method and parameters.
        units: Linear unit, or None for geographic CRSs and for CRSs
               given only by +to_meter.
        to_meter: Length of one linear unit in meters.
        prime_meridian: Prime meridian.
        axis: PROJ axis order string.

    Examples:
        >>> from pykoord import CRSFactory
        >>> crs = CRSFactory().create_from_parameters(None, "+proj=longlat +datum=WGS84")
        >>> crs.is_geographic
        True
        >>> crs.to_proj4()
        '+proj=longlat +datum=WGS84 +no_defs'
    """

    name: str | None
    parameters: tuple[str, ...]
    datum: Datum
    projection: Projection
    units: Unit | None = None
    to_meter: float = 1.0
    prime_meridian: PrimeMeridian = GREENWICH
    axis: str = "enu"

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self.datum.ellipsoid

    @property
    def is_geographic(self) -> bool:
        return self.projection.is_geographic

    def to_proj4(self) -> str:
        """Render the CRS as a canonical PROJ.4 parameter string."""
        proj = self.projection
        parts = [f"+proj={proj.code}"]

        if proj.code == "utm":
            parts.append(f"+zone={proj.zone}")
            if proj.south:
                parts.append("+south")
        elif not proj.is_geographic:
            for key in ("lat_0", "lon_0", "lat_1", "lat_2", "lat_ts",
                        "lonc", "alpha", "gamma", "h"):
                value = getattr(proj, key)
                if value is not None and not (key in ("lat_0", "lon_0") and value == 0.0):
                    parts.append(f"+{key}={format_number(value)}")
            if proj.k_0 != 1.0:
                parts.append(f"+k_0={format_number(proj.k_0)}")
            parts.append(f"+x_0={format_number(proj.x_0)}")
            parts.append(f"+y_0={format_number(proj.y_0)}")

        datum = self.datum
        if datum.code:
            parts.append(f"+datum={datum.code}")
        else:
            ell = datum.ellipsoid
            if ell.code:
                parts.append(f"+ellps={ell.code}")
            elif ell.is_sphere:
                parts.append(f"+R={format_number(ell.a)}")
            else:
                parts.append(f"+a={format_number(ell.a)}")
                parts.append(f"+b={format_number(ell.b)}")
            if datum.towgs84 is not None:
                parts.append("+towgs84=" + ",".join(format_number(v) for v in datum.towgs84))
            if datum.nadgrids:
                parts.append(f"+nadgrids={datum.nadgrids}")

        if self.prime_meridian.longitude != 0.0:
            pm = self.prime_meridian
            parts.append(f"+pm={pm.code or format_number(pm.longitude)}")

        if not proj.is_geographic:
            if self.units is not None:
                parts.append(f"+units={self.units.code}")
            else:
                parts.append(f"+to_meter={format_number(self.to_meter)}")

        if self.axis != "enu":
            parts.append(f"+axis={self.axis}")

        parts.append("+no_defs")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.name if self.name else self.to_proj4()

    def __repr__(self) -> str:
        label = self.name or "anonymous"
        return (
            f"CoordinateReferenceSystem({label}, proj={self.projection.code}, "
            f"datum={self.datum.code or self.ellipsoid.code or 'custom'})"
        )
