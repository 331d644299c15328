"""Projection methods and resolved projection parameters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionDef:
    """A supported projection method (the value of +proj).

    Attributes:
        code: PROJ method name (e.g. "aea").
        name: Human readable name.
        geographic: True for the lat/long pseudo-projections.
    """

    code: str
    name: str
    geographic: bool = False


@dataclass(frozen=True)
class Projection:
    """A projection method with its resolved parameters.

    Angles are decimal degrees, false easting/northing are meters.
    Parameters a method does not use keep their defaults.
    """

    method: ProjectionDef
    lat_0: float = 0.0
    lon_0: float = 0.0
    lat_1: float | None = None
    lat_2: float | None = None
    lat_ts: float | None = None
    lonc: float | None = None
    alpha: float | None = None
    gamma: float | None = None
    k_0: float = 1.0
    x_0: float = 0.0
    y_0: float = 0.0
    h: float | None = None
    zone: int | None = None
    south: bool = False

    @property
    def code(self) -> str:
        return self.method.code

    @property
    def is_geographic(self) -> bool:
        return self.method.geographic

    def __repr__(self) -> str:
        return f"Projection({self.method.code})"


PROJECTIONS: dict[str, ProjectionDef] = {
    p.code: p
    for p in (
        ProjectionDef("longlat", "Lat/long (Geodetic)", geographic=True),
        ProjectionDef("latlong", "Lat/long (Geodetic alias)", geographic=True),
        ProjectionDef("lonlat", "Lat/long (Geodetic alias)", geographic=True),
        ProjectionDef("latlon", "Lat/long (Geodetic alias)", geographic=True),
        ProjectionDef("aea", "Albers Equal Area"),
        ProjectionDef("aeqd", "Azimuthal Equidistant"),
        ProjectionDef("cass", "Cassini"),
        ProjectionDef("cea", "Equal Area Cylindrical"),
        ProjectionDef("eqc", "Equidistant Cylindrical (Plate Carree)"),
        ProjectionDef("eqdc", "Equidistant Conic"),
        ProjectionDef("geos", "Geostationary Satellite View"),
        ProjectionDef("gnom", "Gnomonic"),
        ProjectionDef("krovak", "Krovak"),
        ProjectionDef("laea", "Lambert Azimuthal Equal Area"),
        ProjectionDef("lcc", "Lambert Conformal Conic"),
        ProjectionDef("merc", "Mercator"),
        ProjectionDef("mill", "Miller Cylindrical"),
        ProjectionDef("moll", "Mollweide"),
        ProjectionDef("nzmg", "New Zealand Map Grid"),
        ProjectionDef("omerc", "Oblique Mercator"),
        ProjectionDef("ortho", "Orthographic"),
        ProjectionDef("poly", "Polyconic (American)"),
        ProjectionDef("robin", "Robinson"),
        ProjectionDef("sinu", "Sinusoidal (Sanson-Flamsteed)"),
        ProjectionDef("somerc", "Swiss. Obl. Mercator"),
        ProjectionDef("stere", "Stereographic"),
        ProjectionDef("sterea", "Oblique Stereographic Alternative"),
        ProjectionDef("tmerc", "Transverse Mercator"),
        ProjectionDef("utm", "Universal Transverse Mercator (UTM)"),
        ProjectionDef("vandg", "van der Grinten (I)"),
    )
}
