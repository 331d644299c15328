"""Geodetic datums and the built-in datum table."""

from __future__ import annotations

from dataclasses import dataclass

from pykoord.core.ellipsoid import ELLIPSOIDS, Ellipsoid


@dataclass(frozen=True)
class Datum:
    """Geodetic datum: an ellipsoid plus its relation to WGS84.

    Attributes:
        code: PROJ datum identifier (e.g. "NAD83"), or "" for a datum
              assembled from +ellps/+towgs84 parameters.
        ellipsoid: Reference ellipsoid.
        towgs84: 3 or 7 Helmert parameters to WGS84, if known.
        nadgrids: Grid shift file list (kept verbatim, never interpolated).
        name: Human readable name.
    """

    code: str
    ellipsoid: Ellipsoid
    towgs84: tuple[float, ...] | None = None
    nadgrids: str | None = None
    name: str = ""

    @property
    def is_wgs84(self) -> bool:
        """True if the datum is WGS84 or carries a null shift to it."""
        if self.nadgrids:
            return False
        if self.towgs84 is not None and any(v != 0.0 for v in self.towgs84):
            return False
        return self.ellipsoid.a == ELLIPSOIDS["WGS84"].a and abs(
            self.ellipsoid.es - ELLIPSOIDS["WGS84"].es
        ) < 1e-12

    def __repr__(self) -> str:
        label = self.code or "anonymous"
        return f"Datum({label}, ellipsoid={self.ellipsoid.code or 'custom'})"


DATUMS: dict[str, Datum] = {
    d.code: d
    for d in (
        Datum("WGS84", ELLIPSOIDS["WGS84"], (0.0, 0.0, 0.0), name="WGS84"),
        Datum("GGRS87", ELLIPSOIDS["GRS80"], (-199.87, 74.79, 246.62),
              name="Greek_Geodetic_Reference_System_1987"),
        Datum("NAD83", ELLIPSOIDS["GRS80"], (0.0, 0.0, 0.0),
              name="North_American_Datum_1983"),
        Datum("NAD27", ELLIPSOIDS["clrk66"], None,
              "@conus,@alaska,@ntv2_0.gsb,@ntv1_can.dat",
              name="North_American_Datum_1927"),
        Datum("potsdam", ELLIPSOIDS["bessel"],
              (598.1, 73.7, 418.2, 0.202, 0.045, -2.455, 6.7),
              name="Potsdam Rauenberg 1950 DHDN"),
        Datum("carthage", ELLIPSOIDS["clrk80ign"], (-263.0, 6.0, 431.0),
              name="Carthage 1934 Tunisia"),
        Datum("hermannskogel", ELLIPSOIDS["bessel"],
              (577.326, 90.129, 463.919, 5.137, 1.474, 5.297, 2.4232),
              name="Hermannskogel"),
        Datum("ire65", ELLIPSOIDS["mod_airy"],
              (482.530, -130.596, 564.557, -1.042, -0.214, -0.631, 8.15),
              name="Ireland 1965"),
        Datum("nzgd49", ELLIPSOIDS["intl"],
              (59.47, -5.04, 187.44, 0.47, -0.1, 1.024, -4.5993),
              name="New Zealand Geodetic Datum 1949"),
        Datum("OSGB36", ELLIPSOIDS["airy"],
              (446.448, -125.157, 542.060, 0.1502, 0.2470, 0.8421, -20.4894),
              name="Airy 1830"),
    )
}
